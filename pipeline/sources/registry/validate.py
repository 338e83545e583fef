# pipeline/sources/registry/validate.py
#
# Validate, deduplicate and key the parsed registry exports.
#
#   - Rows are checked with the same domain rules the API applies
#     (validate_document, validate_areas, normalize_date), so an imported
#     database never holds a record the API would have refused.
#   - Natural keys: producer document (digits), producer name, property
#     (producer, name), crop name, harvest label, planting
#     (property, harvest, crop). The first occurrence wins.
#   - References are resolved by natural key and every surviving row gets a
#     UUID4 id and creation timestamps.
#   - Each function logs how many rows it dropped and why.
#
# Invariant: every output frame has exactly the columns of its DuckDB table
# (minus deleted_at), with the dtypes declared in the *_SCHEMA dicts.
from __future__ import annotations

import re
from collections import Counter
from datetime import date

import polars as pl

from api.domain.errors import DomainValidationError
from api.domain.harvest.dates import CompletionMode, describe_iso_date_error, normalize_date
from api.domain.producer.document import clean_document, validate_document
from api.domain.property.areas import to_area_decimal, validate_areas
from api.infrastructure.repositories.duckdb_paging import agora, novo_id
from pipeline.log import log

_AREA = re.compile(r"\d+(\.\d{1,2})?", re.ASCII)
_COORDINATE = re.compile(r"-?\d+(\.\d{1,6})?", re.ASCII)
_NON_DIGIT = re.compile(r"\D", re.ASCII)

PRODUCERS_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8(),
    "document_type": pl.Utf8(),
    "document": pl.Utf8(),
    "name": pl.Utf8(),
    "created_at": pl.Datetime("us"),
    "updated_at": pl.Datetime("us"),
}

# Areas and coordinates stay as decimal strings; build_duckdb casts them to
# the DECIMAL column types, so no float rounding happens on the way.
PROPERTIES_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8(),
    "producer_id": pl.Utf8(),
    "name": pl.Utf8(),
    "city": pl.Utf8(),
    "state": pl.Utf8(),
    "total_area_ha": pl.Utf8(),
    "arable_area_ha": pl.Utf8(),
    "vegetation_area_ha": pl.Utf8(),
    "cep": pl.Utf8(),
    "complement": pl.Utf8(),
    "latitude": pl.Utf8(),
    "longitude": pl.Utf8(),
    "created_at": pl.Datetime("us"),
    "updated_at": pl.Datetime("us"),
}

CROPS_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8(),
    "name": pl.Utf8(),
    "created_at": pl.Datetime("us"),
}

HARVESTS_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8(),
    "label": pl.Utf8(),
    "year": pl.Int32(),
    "start_date": pl.Date(),
    "end_date": pl.Date(),
    "created_at": pl.Datetime("us"),
    "updated_at": pl.Datetime("us"),
}

PROPERTY_CROPS_SCHEMA: dict[str, pl.DataType] = {
    "id": pl.Utf8(),
    "property_id": pl.Utf8(),
    "harvest_id": pl.Utf8(),
    "crop_id": pl.Utf8(),
    "created_at": pl.Datetime("us"),
}


def _text(value: str | None, max_len: int) -> str | None:
    """Stripped non-empty text within max_len, else None."""
    if value is None:
        return None
    value = value.strip()
    if not value or len(value) > max_len:
        return None
    return value


def _log_dropped(source: str, kept: int, dropped: Counter[str]) -> None:
    log(f"  {source}: {kept:,} rows kept")
    for reason, count in sorted(dropped.items()):
        log(f"  {source}: {count:,} rows dropped ({reason})")


def validate_producers(df: pl.DataFrame) -> pl.DataFrame:
    """Keep producers with a valid CPF/CNPJ and a name; documents become digits only."""
    now = agora()
    rows: list[dict[str, object]] = []
    dropped: Counter[str] = Counter()
    documents: set[str] = set()
    names: set[str] = set()

    for row in df.iter_rows(named=True):
        name = _text(row["name"], 150)
        if name is None:
            dropped["missing or too long name"] += 1
            continue
        try:
            document_type = validate_document(row["document"] or "")
        except DomainValidationError:
            dropped["invalid document"] += 1
            continue
        document = clean_document(row["document"])
        if document in documents or name in names:
            dropped["duplicate"] += 1
            continue
        documents.add(document)
        names.add(name)
        rows.append(
            {
                "id": novo_id(),
                "document_type": document_type.value,
                "document": document,
                "name": name,
                "created_at": now,
                "updated_at": now,
            }
        )

    _log_dropped("producers", len(rows), dropped)
    return pl.DataFrame(rows, schema=PRODUCERS_SCHEMA)


def _optional_cep(raw: str | None) -> tuple[bool, str | None]:
    if raw is None:
        return True, None
    digits = _NON_DIGIT.sub("", raw)
    if not 8 <= len(digits) <= 20:
        return False, None
    return True, digits


def _optional_coordinate(raw: str | None) -> tuple[bool, str | None]:
    if raw is None:
        return True, None
    if not _COORDINATE.fullmatch(raw):
        return False, None
    return True, raw


def validate_properties(df: pl.DataFrame, producers: pl.DataFrame) -> pl.DataFrame:
    """Keep properties whose producer was imported and whose areas are consistent.

    Args:
        df:        Parsed properties export.
        producers: Output of validate_producers, used to resolve producer_document.
    """
    now = agora()
    producer_ids = dict(zip(producers["document"], producers["id"], strict=True))
    rows: list[dict[str, object]] = []
    dropped: Counter[str] = Counter()
    seen: set[tuple[str, str]] = set()

    for row in df.iter_rows(named=True):
        producer_id = producer_ids.get(clean_document(row["producer_document"] or ""))
        if producer_id is None:
            dropped["unknown producer"] += 1
            continue

        name = _text(row["name"], 150)
        city = _text(row["city"], 100)
        state = _text(row["state"], 100)
        if name is None or city is None or state is None:
            dropped["missing name, city or state"] += 1
            continue

        areas = [row["total_area_ha"] or "", row["arable_area_ha"] or "", row["vegetation_area_ha"] or ""]
        if not all(_AREA.fullmatch(a) for a in areas):
            dropped["invalid areas"] += 1
            continue
        try:
            validate_areas(*areas)
            total, arable, vegetation = (str(to_area_decimal(a)) for a in areas)
        except DomainValidationError:
            dropped["invalid areas"] += 1
            continue

        cep_ok, cep = _optional_cep(row["cep"])
        lat_ok, latitude = _optional_coordinate(row["latitude"])
        lon_ok, longitude = _optional_coordinate(row["longitude"])
        complement = row["complement"]
        if not (cep_ok and lat_ok and lon_ok) or (complement is not None and len(complement) > 255):
            dropped["invalid optional field"] += 1
            continue

        if (producer_id, name) in seen:
            dropped["duplicate"] += 1
            continue
        seen.add((producer_id, name))
        rows.append(
            {
                "id": novo_id(),
                "producer_id": producer_id,
                "name": name,
                "city": city,
                "state": state,
                "total_area_ha": total,
                "arable_area_ha": arable,
                "vegetation_area_ha": vegetation,
                "cep": cep,
                "complement": complement,
                "latitude": latitude,
                "longitude": longitude,
                "created_at": now,
                "updated_at": now,
            }
        )

    _log_dropped("properties", len(rows), dropped)
    return pl.DataFrame(rows, schema=PROPERTIES_SCHEMA)


def validate_crops(df: pl.DataFrame) -> pl.DataFrame:
    now = agora()
    rows: list[dict[str, object]] = []
    dropped: Counter[str] = Counter()
    names: set[str] = set()

    for row in df.iter_rows(named=True):
        name = _text(row["name"], 150)
        if name is None:
            dropped["missing or too long name"] += 1
            continue
        if name in names:
            dropped["duplicate"] += 1
            continue
        names.add(name)
        rows.append({"id": novo_id(), "name": name, "created_at": now})

    _log_dropped("crops", len(rows), dropped)
    return pl.DataFrame(rows, schema=CROPS_SCHEMA)


def _harvest_date(raw: str | None, mode: CompletionMode) -> date | None:
    normalized = normalize_date(raw or "", mode)
    if not isinstance(normalized, str) or describe_iso_date_error(normalized) is not None:
        return None
    return date.fromisoformat(normalized)


def _harvest_year(raw: str | None) -> int | None:
    try:
        year = int(raw or "")
    except ValueError:
        return None
    return year if 1800 <= year <= 9999 else None


def validate_harvests(df: pl.DataFrame) -> pl.DataFrame:
    """Partial dates are completed: start_date to the first day, end_date to the last."""
    now = agora()
    rows: list[dict[str, object]] = []
    dropped: Counter[str] = Counter()
    labels: set[str] = set()

    for row in df.iter_rows(named=True):
        label = _text(row["label"], 30)
        year = _harvest_year(row["year"])
        if label is None or year is None:
            dropped["missing label or invalid year"] += 1
            continue
        start_date = _harvest_date(row["start_date"], "start")
        end_date = _harvest_date(row["end_date"], "end")
        if start_date is None or end_date is None:
            dropped["invalid date"] += 1
            continue
        if end_date < start_date:
            dropped["end date before start date"] += 1
            continue
        if label in labels:
            dropped["duplicate"] += 1
            continue
        labels.add(label)
        rows.append(
            {
                "id": novo_id(),
                "label": label,
                "year": year,
                "start_date": start_date,
                "end_date": end_date,
                "created_at": now,
                "updated_at": now,
            }
        )

    _log_dropped("harvests", len(rows), dropped)
    return pl.DataFrame(rows, schema=HARVESTS_SCHEMA)


def validate_plantings(
    df: pl.DataFrame,
    producers: pl.DataFrame,
    properties: pl.DataFrame,
    harvests: pl.DataFrame,
    crops: pl.DataFrame,
) -> pl.DataFrame:
    """Resolve (producer document, property name, harvest label, crop name) to ids."""
    now = agora()
    producer_ids = dict(zip(producers["document"], producers["id"], strict=True))
    property_ids = {
        (producer_id, name): property_id
        for property_id, producer_id, name in zip(
            properties["id"], properties["producer_id"], properties["name"], strict=True
        )
    }
    harvest_ids = dict(zip(harvests["label"], harvests["id"], strict=True))
    crop_ids = dict(zip(crops["name"], crops["id"], strict=True))

    rows: list[dict[str, object]] = []
    dropped: Counter[str] = Counter()
    seen: set[tuple[str, str, str]] = set()

    for row in df.iter_rows(named=True):
        producer_id = producer_ids.get(clean_document(row["producer_document"] or ""))
        property_id = property_ids.get((producer_id, row["property_name"]))
        harvest_id = harvest_ids.get(row["harvest_label"])
        crop_id = crop_ids.get(row["crop_name"])
        if property_id is None or harvest_id is None or crop_id is None:
            dropped["unresolved reference"] += 1
            continue
        key = (property_id, harvest_id, crop_id)
        if key in seen:
            dropped["duplicate"] += 1
            continue
        seen.add(key)
        rows.append(
            {
                "id": novo_id(),
                "property_id": property_id,
                "harvest_id": harvest_id,
                "crop_id": crop_id,
                "created_at": now,
            }
        )

    _log_dropped("plantings", len(rows), dropped)
    return pl.DataFrame(rows, schema=PROPERTY_CROPS_SCHEMA)
