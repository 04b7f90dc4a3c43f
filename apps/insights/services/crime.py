"""
Statistics Finland crime statistics sync
Загрузка помесячной статистики преступлений из PxWeb API (json-stat2)
"""

from __future__ import annotations

import itertools
import logging
import time
from collections.abc import Iterable, Iterator

import requests
from django.conf import settings  # type: ignore
from django.db import transaction  # type: ignore
from django.db.models import Sum  # type: ignore
from django.utils import timezone  # type: ignore

from apps.backoffice.services import record_event
from apps.properties.municipalities import MUNICIPALITY_CODES
from shared.exceptions import ExternalServiceError

from ..models import CrimeRecord

logger = logging.getLogger(__name__)

CRIME_DATA_API_URL = getattr(
    settings,
    "CRIME_DATA_API_URL",
    "https://pxdata.stat.fi:443/PxWeb/api/v1/en/StatFin/rpk/statfin_rpk_pxt_13it.px",
)
EXTERNAL_HTTP_TIMEOUT = getattr(settings, "EXTERNAL_HTTP_TIMEOUT", 30)

MONTH_DIMENSION = "Kuukausi"
MUNICIPALITY_DIMENSION = "Kunta"
CRIME_GROUP_DIMENSION = "Rikosryhmä ja teonkuvauksen tarkenne"
MUNICIPALITY_FILTER = "agg:_Municipalities in numerical order 2025.agg"
WHOLE_COUNTRY = "SSS"
TOTAL_CRIME_GROUP = "101T603"
VERIFICATION_MUNICIPALITY = "KU564"

MONTHS_TO_SYNC = 12
BATCH_SIZE = 500
RETRY_ATTEMPTS = 3
RETRY_BASE_DELAY = 1.0
RETRY_MAX_DELAY = 5.0
USER_AGENT = "HomeHarborSync/1.0"

CRIME_GROUP_CODES: tuple[str, ...] = (
    "101T603", "101T504X406", "101T161", "101T103",
    "101", "102", "103",
    "101T103a0108", "101T103a0107",
    "101T103a0101", "101T103a0102", "101T103a0103",
    "101T103a0104", "101T103a0105", "101T103a0106",
    "111", "112", "113", "114", "114a0201", "115", "115a0301", "116", "117",
    "121T122", "121",
    "407", "408", "409",
    "406_505_601T603", "406", "505", "505a1201", "505a2501", "505a2502", "505a1205",
    "601", "602", "600", "603",
)


class CrimeDataError(ExternalServiceError):
    """Statistics Finland API is unreachable or returned an unusable cube."""

    default_detail = "Crime statistics service is unavailable."


def to_iso_month(px_month: str) -> str:
    """'2024M12' -> '2024-12'."""
    year, _, month = px_month.partition("M")
    return f"{year}-{month}" if month else px_month


def _category_codes(dimension: dict) -> list[str]:
    """Коды категорий измерения в порядке индекса (index бывает dict или list)."""
    index = dimension["category"]["index"]
    if isinstance(index, list):
        return list(index)
    return [code for code, _ in sorted(index.items(), key=lambda item: item[1])]


def parse_cube(data: dict) -> Iterator[dict]:
    """
    Разворачивает json-stat2 куб в плоские записи.

    Значения лежат в row-major порядке измерений из ``data["id"]``
    (месяц × муниципалитет × группа × показатель). Пустые ячейки пропускаются.
    """
    dimension_ids: list[str] = data["id"]
    dimensions = data["dimension"]
    axes = [_category_codes(dimensions[dim_id]) for dim_id in dimension_ids]
    values = data.get("value") or []
    labels = {dim_id: dimensions[dim_id]["category"].get("label", {}) for dim_id in dimension_ids}

    for offset, coordinates in enumerate(itertools.product(*axes)):
        if offset >= len(values):
            break
        value = values[offset]
        if value is None or value == "":
            continue
        try:
            count = int(float(value))
        except (TypeError, ValueError):
            continue

        point = dict(zip(dimension_ids, coordinates))
        municipality = point[MUNICIPALITY_DIMENSION]
        group = point[CRIME_GROUP_DIMENSION]
        yield {
            "month": to_iso_month(point[MONTH_DIMENSION]),
            "municipality_code": municipality,
            "municipality_name": labels[MUNICIPALITY_DIMENSION].get(municipality, municipality),
            "crime_group_code": group,
            "crime_group_name": labels[CRIME_GROUP_DIMENSION].get(group, group),
            "crime_count": count,
        }


def build_query(months: list[str], municipalities: list[str]) -> dict:
    return {
        "query": [
            {"code": MONTH_DIMENSION, "selection": {"filter": "item", "values": months}},
            {
                "code": MUNICIPALITY_DIMENSION,
                "selection": {"filter": MUNICIPALITY_FILTER, "values": municipalities},
            },
            {
                "code": CRIME_GROUP_DIMENSION,
                "selection": {"filter": "item", "values": list(CRIME_GROUP_CODES)},
            },
        ],
        "response": {"format": "json-stat2"},
    }


def _with_retries(description: str, func, *args, **kwargs):
    """Вызывает func до RETRY_ATTEMPTS раз с экспоненциальной задержкой."""
    delay = RETRY_BASE_DELAY
    for attempt in range(1, RETRY_ATTEMPTS + 1):
        try:
            return func(*args, **kwargs)
        except (requests.RequestException, ValueError) as exc:
            if attempt == RETRY_ATTEMPTS:
                logger.error(f"{description} failed after {attempt} attempts: {exc}")
                raise CrimeDataError(f"{description} failed: {exc}") from exc
            logger.warning(f"{description} attempt {attempt} failed: {exc}; retrying in {delay:.0f}s")
            time.sleep(delay)
            delay = min(delay * 2, RETRY_MAX_DELAY)


class CrimeDataService:
    """Синхронизация таблицы statfin_rpk_pxt_13it с моделью CrimeRecord."""

    def __init__(self, api_url: str | None = None, timeout: int | None = None):
        self.api_url = api_url or CRIME_DATA_API_URL
        self.timeout = timeout or EXTERNAL_HTTP_TIMEOUT
        self.headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}

    def _get_metadata(self) -> dict:
        response = requests.get(self.api_url, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _post_query(self, query: dict) -> dict:
        response = requests.post(self.api_url, json=query, headers=self.headers, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def available_months(self, limit: int = MONTHS_TO_SYNC) -> list[str]:
        """Последние ``limit`` месяцев, опубликованных в таблице."""
        metadata = _with_retries("Crime table metadata", self._get_metadata)
        for variable in metadata.get("variables", []):
            if variable.get("code") == MONTH_DIMENSION:
                values = sorted(variable.get("values") or [])
                return values[-limit:]
        raise CrimeDataError("Crime table metadata has no month dimension.")

    def build_queries(self, months: list[str]) -> list[dict]:
        """Один запрос по всей стране и один по городам каталога."""
        cities = [f"KU{code}" for code in MUNICIPALITY_CODES.values()]
        return [build_query(months, [WHOLE_COUNTRY]), build_query(months, cities)]

    def fetch(self, query: dict) -> dict:
        return _with_retries("Crime data query", self._post_query, query)

    def upsert(self, records: Iterable[dict]) -> int:
        """Пакетный upsert по (month, municipality_code, crime_group_code)."""
        now = timezone.now()
        saved = 0
        batch: list[CrimeRecord] = []
        with transaction.atomic():
            for record in records:
                batch.append(CrimeRecord(**record, updated_at=now))
                if len(batch) >= BATCH_SIZE:
                    saved += self._flush(batch)
                    batch = []
            if batch:
                saved += self._flush(batch)
        return saved

    @staticmethod
    def _flush(batch: list[CrimeRecord]) -> int:
        CrimeRecord.objects.bulk_create(
            batch,
            update_conflicts=True,
            unique_fields=["month", "municipality_code", "crime_group_code"],
            update_fields=["crime_count", "municipality_name", "crime_group_name", "updated_at"],
        )
        return len(batch)

    def sync(self) -> int:
        """Полная синхронизация; возвращает число сохраненных записей."""
        started = time.monotonic()
        months = self.available_months()
        if not months:
            logger.warning("Crime table has no published months")
            return 0
        logger.info(f"Syncing crime data for months {months[0]}..{months[-1]}")

        total = 0
        for query in self.build_queries(months):
            data = self.fetch(query)
            total += self.upsert(parse_cube(data))

        verification = CrimeRecord.objects.filter(municipality_code=VERIFICATION_MUNICIPALITY).count()
        logger.info(f"Crime data sync stored {total} records; {VERIFICATION_MUNICIPALITY} has {verification}")
        record_event(
            "Crime data synchronised",
            source="crime-sync",
            details={
                "records": total,
                "months": months,
                "verification_municipality": VERIFICATION_MUNICIPALITY,
                "verification_count": verification,
                "duration_seconds": round(time.monotonic() - started, 2),
            },
        )
        return total


def monthly_totals(city: str | None = None, months: int = MONTHS_TO_SYNC) -> dict:
    """Сумма преступлений (группа 'всего') по месяцам за последние ``months`` месяцев."""
    today = timezone.localdate()
    first_year, first_month = today.year, today.month - (months - 1)
    while first_month <= 0:
        first_month += 12
        first_year -= 1
    since = f"{first_year:04d}-{first_month:02d}"

    qs = CrimeRecord.objects.filter(crime_group_code=TOTAL_CRIME_GROUP, month__gte=since)
    if city:
        qs = qs.filter(municipality_name__icontains=city)
    else:
        qs = qs.filter(municipality_code=WHOLE_COUNTRY)

    rows = list(qs.values("month").annotate(total_crimes=Sum("crime_count")).order_by("month"))
    return {
        "city": city or "all",
        "total_crimes": sum(row["total_crimes"] or 0 for row in rows),
        "months": months,
        "data_points": len(rows),
        "data": [{"month": row["month"], "total_crimes": row["total_crimes"] or 0} for row in rows],
    }
