#catalog records + loader for exercises.json
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from loguru import logger

from .config import BUNDLED_CATALOG_PATH

REQUIRED_FIELDS = ("id", "name", "muscleGroup", "equipment", "pattern")

FACETS = ("muscle_group", "equipment", "pattern")

MUSCLE_GROUP_ORDER = ("chest", "shoulders", "arms", "back", "legs", "abs", "other")

MUSCLE_GROUP_LABELS: Dict[str, str] = {
    "chest": "胸",
    "back": "背中",
    "shoulders": "肩",
    "arms": "腕",
    "legs": "脚",
    "abs": "体幹",
    "other": "その他",
}


class CatalogLoadError(RuntimeError):
    pass


@dataclass(frozen=True)
class CatalogItem:
    id: str
    name: str
    name_en: str
    muscle_group: str
    equipment: str
    pattern: str
    aliases: Tuple[str, ...] = field(default_factory=tuple)

    def facet(self, facet: str) -> str:
        if facet not in FACETS:
            raise ValueError(f"unknown facet: {facet!r}")
        return getattr(self, facet)

    def to_record(self) -> Dict[str, Any]:
        """Same shape as an exercises.json entry."""
        return {
            "id": self.id,
            "name": self.name,
            "nameEn": self.name_en,
            "muscleGroup": self.muscle_group,
            "aliases": list(self.aliases),
            "equipment": self.equipment,
            "pattern": self.pattern,
        }


def _item_from_record(obj: Any, pos: int) -> CatalogItem:
    if not isinstance(obj, dict):
        raise CatalogLoadError(f"record #{pos} is not an object")

    missing = [k for k in REQUIRED_FIELDS if obj.get(k) is None]
    if missing:
        raise CatalogLoadError(f"record #{pos} is missing {', '.join(missing)}")

    aliases = obj.get("aliases") or []
    if not isinstance(aliases, list):
        raise CatalogLoadError(f"record #{pos}: aliases must be a list")

    return CatalogItem(
        id=str(obj["id"]),
        name=str(obj["name"]),
        name_en=str(obj.get("nameEn") or ""),
        muscle_group=str(obj["muscleGroup"]),
        equipment=str(obj["equipment"]),
        pattern=str(obj["pattern"]),
        aliases=tuple(str(a) for a in aliases),
    )


def load_catalog_from_records(records: Iterable[Any]) -> List[CatalogItem]:
    items = [_item_from_record(obj, pos) for pos, obj in enumerate(records)]

    seen = set()
    for it in items:
        if it.id in seen:
            logger.warning("Duplicate exercise id {!r}; the later record wins", it.id)
        seen.add(it.id)

    if not items:
        logger.warning("Catalog is empty; every search will return no results")
    return items


def load_catalog_json(path: Path) -> List[CatalogItem]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"exercise catalog not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"{path} is not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise CatalogLoadError(f"{path} must contain a JSON array of exercises")

    items = load_catalog_from_records(data)
    logger.debug("Loaded {} exercises from {}", len(items), path)
    return items


def bundled_catalog_path() -> Path:
    return BUNDLED_CATALOG_PATH


def muscle_group_label(key: str) -> str:
    return MUSCLE_GROUP_LABELS.get(key, key)


def facet_values(items: Sequence[CatalogItem], facet: str) -> List[str]:
    """
    Distinct values of `facet` in display order.
    Muscle groups follow MUSCLE_GROUP_ORDER with unknown groups appended
    alphabetically; other facets are plain alphabetical.
    """
    if facet not in FACETS:
        raise ValueError(f"unknown facet: {facet!r}")

    values = {it.facet(facet) for it in items}
    if facet != "muscle_group":
        return sorted(values)

    ordered = [g for g in MUSCLE_GROUP_ORDER if g in values]
    remaining = sorted(values.difference(MUSCLE_GROUP_ORDER))
    return ordered + remaining
