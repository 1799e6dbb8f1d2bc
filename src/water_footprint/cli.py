from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .calculator import FootprintCalculator
from .config import load_config
from .ingest import load_answers, load_submissions_csv, score_submissions

app = typer.Typer(add_completion=False, help="Water footprint calculator for wine producer surveys")

# ---- Config commands ----
config_app = typer.Typer(help="Inspect the footprint configuration.")
app.add_typer(config_app, name="config")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log calculation details to stderr"),
) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


@config_app.command("show")
def show_config(
    config: Optional[Path] = typer.Option(None, "--config", help="JSON file overriding the defaults"),
) -> None:
    """
    Print the effective configuration as JSON (defaults merged with --config).
    """
    try:
        cfg = load_config(config)
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except Exception as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(json.dumps(cfg.model_dump(mode="json"), indent=2, sort_keys=True, ensure_ascii=False))


@app.command()
def score(
    answers: Path = typer.Option(..., "--answers", help="JSON file with one survey response"),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON file overriding the defaults"),
    as_json: bool = typer.Option(False, "--json", help="Print the full report as JSON"),
):
    """
    Calculate the water footprint of one survey response.

    Prints the footprint (cubic meters), its interpretation and
    recommendations. Insufficient answers are reported, not treated as an error.
    """
    try:
        calc = FootprintCalculator(load_config(config))
        report = calc.evaluate(load_answers(answers))
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except Exception as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(report.model_dump(mode="json"), indent=2, sort_keys=True, ensure_ascii=False))
        return

    if report.footprint is None:
        typer.echo("Insufficient data to calculate a water footprint.")
        return

    typer.echo(f"Water footprint: {report.footprint:.4f} m3")
    typer.echo(f"Interpretation: {report.interpretation}")
    typer.echo("Recommendations:")
    for rec in report.recommendations:
        typer.echo(f"- {rec}")


@app.command()
def interpret(
    footprint: float = typer.Argument(..., help="Footprint in cubic meters"),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON file overriding the defaults"),
):
    """
    Print the benchmark tier for a footprint value.
    """
    try:
        calc = FootprintCalculator(load_config(config))
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except Exception as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(calc.get_footprint_interpretation(footprint))


@app.command()
def batch(
    data: Path = typer.Option(..., "--data", help="CSV with survey_answer_id, question_id, answer"),
    out: Path = typer.Option(..., "--out", help="Where to write the results CSV"),
    config: Optional[Path] = typer.Option(None, "--config", help="JSON file overriding the defaults"),
):
    """
    Score every submission in a long-format answers export.

    Writes one row per submission:
      survey_answer_id, calculated_footprint, tier, interpretation
    """
    try:
        calc = FootprintCalculator(load_config(config))
        submissions = load_submissions_csv(data)
        results = score_submissions(submissions, calc)
        out.parent.mkdir(parents=True, exist_ok=True)
        results.to_csv(out, index=False)
    except FileNotFoundError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=2)
    except Exception as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)

    scored = int(results["calculated_footprint"].notna().sum())
    typer.echo(f"Scored {scored} of {len(results)} submission(s).")
    typer.echo(f"Results: {out}")
