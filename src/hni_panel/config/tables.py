"""Keyword, template and tag tables.

The tables are plain data kept in ``hni_panel/data/panel_tables.yaml``. They
are read once into a frozen :class:`PanelTables` so the classifier, generator
and tag extractor stay pure functions over immutable configuration.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml

from hni_panel._defaults import TABLES_ENV_VAR

logger = logging.getLogger(__name__)

_PACKAGED_TABLES = "panel_tables.yaml"


class TableConfigError(ValueError):
    """Raised when a tables file is missing required sections or is malformed."""


@dataclass(frozen=True, slots=True)
class TraitModifier:
    trait: str
    prefix: str = ""
    lowercase: bool = False
    replace_old: str | None = None
    replace_new: str = ""
    suffix: str = ""

    def apply(self, text: str) -> str:
        if self.replace_old:
            text = text.replace(self.replace_old, self.replace_new, 1)
        if self.lowercase:
            text = text.lower()
        return f"{self.prefix}{text}{self.suffix}"


@dataclass(frozen=True, slots=True)
class PreferenceSuffix:
    preference: str
    value: str
    suffix: str


@dataclass(frozen=True, slots=True)
class TagRule:
    needle: str
    label: str


@dataclass(frozen=True, slots=True)
class PanelTables:
    positive_keywords: tuple[str, ...]
    negative_keywords: tuple[str, ...]
    neutral_keywords: tuple[str, ...]
    templates: Mapping[str, tuple[str, ...]]
    default_templates: tuple[str, ...]
    trait_modifiers: tuple[TraitModifier, ...]
    preference_suffixes: tuple[PreferenceSuffix, ...]
    news_sentence: str
    like_rules: tuple[TagRule, ...]
    dislike_rules: tuple[TagRule, ...]
    concern_rules: tuple[TagRule, ...]

    def templates_for(self, *labels: str | None) -> tuple[str, ...]:
        """Return the first template list matching one of *labels*, else the defaults."""
        for label in labels:
            if label and self.templates.get(label):
                return self.templates[label]
        return self.default_templates


def _require(data: Mapping[str, Any], key: str, source: str) -> Any:
    if key not in data:
        raise TableConfigError(f"{source}: missing required section '{key}'")
    return data[key]


def _strings(values: Any, where: str) -> tuple[str, ...]:
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise TableConfigError(f"{where} must be a list of strings")
    return tuple(values)


def _tag_rules(values: Any, where: str) -> tuple[TagRule, ...]:
    rules: list[TagRule] = []
    for entry in values or []:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise TableConfigError(f"{where} entries must be [substring, label] pairs")
        rules.append(TagRule(needle=str(entry[0]), label=str(entry[1])))
    return tuple(rules)


def parse_tables(data: Mapping[str, Any], source: str = "<tables>") -> PanelTables:
    if not isinstance(data, Mapping):
        raise TableConfigError(f"{source}: top level must be a mapping")

    keywords = _require(data, "keywords", source)
    templates = _require(data, "templates", source)
    default_templates = _strings(_require(data, "default_templates", source), "default_templates")
    if not default_templates:
        raise TableConfigError(f"{source}: default_templates must not be empty")
    if not isinstance(templates, Mapping):
        raise TableConfigError(f"{source}: templates must map a label to a list of strings")

    modifiers = []
    for entry in data.get("trait_modifiers") or []:
        replace = entry.get("replace") or {}
        modifiers.append(
            TraitModifier(
                trait=str(entry["trait"]),
                prefix=str(entry.get("prefix", "")),
                lowercase=bool(entry.get("lowercase", False)),
                replace_old=replace.get("old"),
                replace_new=str(replace.get("new", "")),
                suffix=str(entry.get("suffix", "")),
            )
        )

    suffixes = [
        PreferenceSuffix(
            preference=str(entry["preference"]),
            value=str(entry["value"]),
            suffix=str(entry["suffix"]),
        )
        for entry in data.get("preference_suffixes") or []
    ]

    tag_rules = data.get("tag_rules") or {}
    return PanelTables(
        positive_keywords=_strings(keywords.get("positive", []), "keywords.positive"),
        negative_keywords=_strings(keywords.get("negative", []), "keywords.negative"),
        neutral_keywords=_strings(keywords.get("neutral", []), "keywords.neutral"),
        templates=MappingProxyType(
            {str(label): _strings(items, f"templates.{label}") for label, items in templates.items()}
        ),
        default_templates=default_templates,
        trait_modifiers=tuple(modifiers),
        preference_suffixes=tuple(suffixes),
        news_sentence=str(data.get("news_sentence", "")),
        like_rules=_tag_rules(tag_rules.get("likes"), "tag_rules.likes"),
        dislike_rules=_tag_rules(tag_rules.get("dislikes"), "tag_rules.dislikes"),
        concern_rules=_tag_rules(tag_rules.get("concerns"), "tag_rules.concerns"),
    )


def read_tables_file(path: str | Path) -> PanelTables:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise TableConfigError(f"cannot read tables file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise TableConfigError(f"invalid YAML in {path}: {exc}") from exc
    return parse_tables(data or {}, source=str(path))


@lru_cache(maxsize=1)
def _default_tables() -> PanelTables:
    override = os.environ.get(TABLES_ENV_VAR)
    if override:
        logger.info("Loading panel tables from %s", override)
        return read_tables_file(override)
    text = resources.files("hni_panel").joinpath("data").joinpath(_PACKAGED_TABLES).read_text(encoding="utf-8")
    return parse_tables(yaml.safe_load(text), source=_PACKAGED_TABLES)


def load_tables(path: str | Path | None = None) -> PanelTables:
    """Load the panel tables.

    With no *path* the packaged tables (or the file named by
    ``HNI_PANEL_TABLES``) are loaded once and cached for the process.
    """
    if path is not None:
        return read_tables_file(path)
    return _default_tables()
