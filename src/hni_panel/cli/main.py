from __future__ import annotations

import asyncio
import json
import logging
import random
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from hni_panel.analytics import TIME_RANGES, build_report, since_for
from hni_panel.config.settings import PanelSettings
from hni_panel.panel.core import Panel
from hni_panel.personas.base import Persona, ResponseRecord
from hni_panel.personas.registry import PersonaRegistry
from hni_panel.responses.chooser import RandomIndexChooser
from hni_panel.responses.generator import TemplateResponseGenerator
from hni_panel.sentiment.base import POLICIES, ConfidencePolicy
from hni_panel.sentiment.keyword import KeywordSentimentClassifier
from hni_panel.storage import InMemoryRepository, seed_sample_data

app = typer.Typer(name="hni-panel", help="Synthetic HNI persona panel for brand research.")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_jsonl(path: Path) -> list[dict]:
    rows: list[dict] = []
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            if line.strip():
                rows.append(json.loads(line))
    return rows


def _write_jsonl(path: Path, rows: list[str]) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for row in rows:
            fh.write(row + "\n")


def _select_policy(name: str) -> ConfidencePolicy:
    policy = POLICIES.get(name.strip().lower())
    if policy is None:
        raise typer.BadParameter(f"Unsupported confidence policy: {name}. Use one of: {', '.join(POLICIES)}")
    return policy


def _select_personas(name: str, personas_file: Path | None = None) -> list[Persona]:
    if personas_file is not None:
        data = json.loads(personas_file.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise typer.BadParameter("personas file must contain a JSON list of persona objects")
        try:
            return PersonaRegistry.custom(data)
        except TypeError as exc:
            raise typer.BadParameter(f"invalid persona definition: {exc}") from exc

    key = name.strip().lower()
    registry_map = {
        "hni_archetypes": PersonaRegistry.hni_archetypes,
        "professionals": PersonaRegistry.professionals,
    }
    factory = registry_map.get(key)
    if factory is None:
        raise typer.BadParameter(f"Unsupported personas set: {name}")
    return factory()


def _build_generator(spec: str, seed: int | None, model: str):
    template = TemplateResponseGenerator(chooser=RandomIndexChooser(seed=seed))
    spec = spec.strip()
    if spec == "template":
        return template
    if spec.startswith("llm"):
        from hni_panel.responses.llm_generator import LLMResponseGenerator

        model_name = spec.split(":", 1)[1].strip() if ":" in spec else model
        if not model_name:
            raise typer.BadParameter("generator spec 'llm:' requires a model name")
        return LLMResponseGenerator(model=model_name, fallback=template)
    raise typer.BadParameter("Unsupported generator spec. Use one of: template, llm, llm:<model>")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@app.command()
def ask(
    query: str = typer.Option(..., help="Brand query to put to the panel"),
    personas: str = typer.Option("hni_archetypes", help="Persona set: hni_archetypes, professionals"),
    personas_file: Optional[Path] = typer.Option(None, help="JSON file with a list of persona objects"),
    generator: str = typer.Option("template", help="Response generator: template, llm, llm:<model>"),
    policy: str = typer.Option("service", help="Confidence policy: service, quick"),
    news_limit: Optional[int] = typer.Option(None, help="News items fetched per persona"),
    seed: Optional[int] = typer.Option(None, help="Random seed for template choice and latency"),
    concurrency: Optional[int] = typer.Option(None, help="Personas answered concurrently"),
    max_responses: Optional[int] = typer.Option(None, help="Cap on the number of responses"),
    output: Optional[Path] = typer.Option(None, help="Write response records to this JSONL file"),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
) -> None:
    """Ask every active persona a brand query and print their responses."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    overrides = {"news_limit": news_limit, "concurrency": concurrency, "seed": seed}
    settings = replace(
        PanelSettings.from_env(),
        **{key: value for key, value in overrides.items() if value is not None},
    )

    repository = InMemoryRepository()
    stored = seed_sample_data(repository, _select_personas(personas, personas_file))
    panel = Panel(
        repository=repository,
        generator=_build_generator(generator, settings.seed, settings.model),
        classifier=KeywordSentimentClassifier(policy=_select_policy(policy)),
        news_limit=settings.news_limit,
        concurrency=settings.concurrency,
        max_responses=max_responses,
        rng=random.Random(settings.seed),
    )

    result = asyncio.run(panel.run_query(query))
    lines = [record.to_json() for record in result.responses]
    if output is not None:
        _write_jsonl(output, lines)
        typer.echo(f"Wrote {len(lines)} response(s) to {output}")
    else:
        for line in lines:
            typer.echo(line)
    typer.echo(json.dumps(build_report(result.responses, stored), ensure_ascii=True))


@app.command()
def sentiment(
    input: Path = typer.Option(..., help="Input JSONL file with a 'text' field per row"),
    output: Path = typer.Option(..., help="Output JSONL file"),
    policy: str = typer.Option("service", help="Confidence policy: service, quick"),
) -> None:
    """Classify the sentiment of JSONL texts with the keyword classifier."""
    classifier = KeywordSentimentClassifier(policy=_select_policy(policy))
    rows = []
    for row in _load_jsonl(input):
        text = str(row.get("text", ""))
        result = classifier.classify(text)
        rows.append(
            json.dumps(
                {
                    "text": text,
                    "sentiment": result.sentiment.value,
                    "confidence": result.confidence,
                    "matched_keywords": list(result.matched_keywords),
                },
                ensure_ascii=True,
            )
        )
    _write_jsonl(output, rows)
    typer.echo(f"Wrote {len(rows)} classification(s) to {output}")


@app.command()
def report(
    input: Path = typer.Option(..., help="Response records JSONL written by 'ask'"),
    personas: str = typer.Option("hni_archetypes", help="Persona set the responses came from"),
    personas_file: Optional[Path] = typer.Option(None, help="JSON file with a list of persona objects"),
    location: Optional[str] = typer.Option(None, help="Only personas in this location"),
    gender: Optional[str] = typer.Option(None, help="Only personas of this gender"),
    wealth_tier: Optional[str] = typer.Option(None, help="Only personas in this wealth tier, e.g. UHNWI"),
    hni_type: Optional[str] = typer.Option(None, help="Only personas of this HNI type"),
    time_range: str = typer.Option("all", help="Response age window: 7d, 30d, 90d, 1y, all"),
) -> None:
    """Summarise response records into sentiment and demographic breakdowns."""
    try:
        since = since_for(time_range.strip().lower())
    except ValueError as exc:
        raise typer.BadParameter(f"{exc}. Use one of: {', '.join(TIME_RANGES)}, all") from exc

    rows = _load_jsonl(input)
    if not rows:
        raise typer.BadParameter("Input JSONL is empty.")
    responses = [ResponseRecord.from_dict(row) for row in rows]
    stored = seed_sample_data(InMemoryRepository(), _select_personas(personas, personas_file))
    summary = build_report(
        responses,
        stored,
        location=location,
        gender=gender,
        wealth_tier=wealth_tier,
        hni_type=hni_type,
        since=since,
    )
    typer.echo(json.dumps(summary, ensure_ascii=True))


def main(argv: list[str] | None = None) -> None:
    if argv is not None:
        app(standalone_mode=False, args=argv)
    else:
        app()


if __name__ == "__main__":
    main()
