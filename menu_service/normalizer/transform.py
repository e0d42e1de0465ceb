from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

from .config import (
    DEFAULT_NORMALIZER_CONFIG,
    DESCRIPTION_FIELD,
    FALLBACK_ID_PREFIX,
    NAME_FIELD,
    PRICE_FIELD,
    SECTION_FIELD,
    SECTION_LABELS,
    SECTION_PREFIXES,
    SUBCATEGORY_FIELD,
    NormalizerConfig,
)
from .models import (
    CategorySection,
    LanguageOption,
    LocalizedText,
    MenuConfig,
    MenuDocument,
    NormalizedItem,
)

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "La transformación se ha completado con éxito."


def section_key(value: Any) -> str:
    """Render a raw section value as a group key the way JSON object keys read."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def partition_by_section(
    records: Iterable[Mapping[str, Any]],
    section_field: str = SECTION_FIELD,
) -> dict[str, list[Mapping[str, Any]]]:
    """Group records by section, keeping first-seen section order and input order."""
    sections: dict[str, list[Mapping[str, Any]]] = {}
    dropped = 0
    for record in records:
        section = record.get(section_field)
        if not section:
            dropped += 1
            continue
        sections.setdefault(section_key(section), []).append(record)

    if dropped:
        logger.warning("Dropped %d record(s) without a %r value", dropped, section_field)
    return sections


def resolve_section_label(
    section: str,
    labels: Mapping[str, Mapping[str, str]] = SECTION_LABELS,
) -> LocalizedText:
    label = labels.get(section, {"es": section, "en": section})
    return LocalizedText(es=label["es"], en=label["en"])


def resolve_id_prefix(section: str, prefixes: Mapping[str, str] = SECTION_PREFIXES) -> str:
    return prefixes.get(section, FALLBACK_ID_PREFIX)


def build_item_id(prefix: str, position: int) -> str:
    # Positions past 999 widen the suffix instead of truncating it.
    return f"{prefix}-{position:03d}"


def transform_item(
    record: Mapping[str, Any],
    section: str,
    position: int,
    prefixes: Mapping[str, str] = SECTION_PREFIXES,
) -> NormalizedItem:
    """
    Reshape one flat export record into a normalized menu item.

    The dish name fills both languages; the English description is always
    left empty. Price and subcategory are passed through untouched.
    Fields missing from the record are left unset so they are omitted
    from the serialized document; an explicit null is kept.
    """
    name: dict[str, Any] = {}
    if NAME_FIELD in record:
        name = {"es": record[NAME_FIELD], "en": record[NAME_FIELD]}

    description: dict[str, Any] = {"en": ""}
    if DESCRIPTION_FIELD in record:
        description["es"] = record[DESCRIPTION_FIELD]

    extra = {
        attr: record[source]
        for attr, source in (("price", PRICE_FIELD), ("subcategory", SUBCATEGORY_FIELD))
        if source in record
    }
    return NormalizedItem(
        id=build_item_id(resolve_id_prefix(section, prefixes), position),
        name=LocalizedText(**name),
        description=LocalizedText(**description),
        **extra,
    )


def section_slug(section: str) -> str:
    # Only the first space is replaced: "A B C" -> "a_b c".
    return section.lower().replace(" ", "_", 1)


def build_menu_config(config: NormalizerConfig = DEFAULT_NORMALIZER_CONFIG) -> MenuConfig:
    return MenuConfig(
        currency=config.currency,
        languages=[LanguageOption(**language) for language in config.languages],
    )


def build_menu_document(
    records: Iterable[Mapping[str, Any]],
    config: NormalizerConfig = DEFAULT_NORMALIZER_CONFIG,
) -> MenuDocument:
    """
    Assemble the full menu document from flat export records.

    Item positions restart at 1 for every section. Sections whose slugs
    collide overwrite each other in place.
    """
    document = MenuDocument(config=build_menu_config(config), menu={})

    for section, section_records in partition_by_section(records).items():
        items = [
            transform_item(record, section, position, config.section_prefixes)
            for position, record in enumerate(section_records, start=1)
        ]
        logger.debug("Section %r: %d item(s)", section, len(items))
        document.menu[section_slug(section)] = CategorySection(
            name=resolve_section_label(section, config.section_labels),
            items=items,
        )

    return document


def load_source_records(path: Path) -> list[dict[str, Any]]:
    with open(path, encoding="utf-8") as f:
        records = json.load(f)
    if not isinstance(records, list):
        raise TypeError(
            f"Expected a JSON array of menu records in {path}, got {type(records).__name__}"
        )
    return records


def write_menu_document(document: MenuDocument, path: Path, indent: int = 2) -> Path:
    # Serialize fully before touching the output file.
    payload = json.dumps(
        document.model_dump(exclude_unset=True), indent=indent, ensure_ascii=False
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(payload, encoding="utf-8")
    return path


def run_normalization(config: NormalizerConfig = DEFAULT_NORMALIZER_CONFIG) -> Path:
    """
    Execute the menu normalization run.

    Steps:
    - Load the flat export from ``config.input_path``.
    - Group, reshape and assemble the bilingual menu document.
    - Write it as indented JSON to ``config.output_path``.
    """
    records = load_source_records(config.input_path)
    logger.info("Loaded %d record(s) from %s", len(records), config.input_path)

    document = build_menu_document(records, config)
    output_path = write_menu_document(document, config.output_path, config.indent)

    logger.info("Wrote %d section(s) to %s", len(document.menu), output_path)
    return output_path


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_normalization()
    print(SUCCESS_MESSAGE)
