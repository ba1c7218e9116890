"""
Product Spec Comparison — Spec Catalog

The bundled phone catalog, in display order, plus loading of replacement
catalogs from JSON. Catalogs are frozen once built.
"""
from __future__ import annotations
import logging
from functools import lru_cache
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from .config import get_settings
from .models import SpecCatalog, SpecCategory, SpecDefinition

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """A catalog file could not be read or did not validate."""


def _spec(key: str, label: str, numeric: bool = False, lower: bool = False) -> SpecDefinition:
    return SpecDefinition(key=key, label=label, is_numeric=numeric, lower_is_better=lower)


DEFAULT_CATALOG = SpecCatalog(
    version="2024.1",
    categories=(
        SpecCategory(name="Màn hình", specs=(
            _spec("specs.screen.size", "Kích thước"),
            _spec("specs.screen.resolution", "Độ phân giải"),
            _spec("specs.screen.technology", "Công nghệ"),
        )),
        SpecCategory(name="Bộ xử lý", specs=(
            _spec("specs.processor.chipset", "Chipset"),
            _spec("specs.processor.cpu", "CPU"),
            _spec("specs.processor.gpu", "GPU"),
        )),
        SpecCategory(name="Bộ nhớ", specs=(
            _spec("specs.memory.ram", "RAM", numeric=True),
            _spec("specs.memory.storage", "Bộ nhớ trong", numeric=True),
            _spec("specs.memory.expandable", "Mở rộng"),
        )),
        SpecCategory(name="Camera", specs=(
            _spec("specs.camera.rear.primary", "Camera chính", numeric=True),
            _spec("specs.camera.rear.secondary", "Camera phụ"),
            _spec("specs.camera.rear.tertiary", "Camera tele"),
            _spec("specs.camera.front", "Camera trước", numeric=True),
        )),
        SpecCategory(name="Pin", specs=(
            _spec("specs.battery.capacity", "Dung lượng", numeric=True),
            _spec("specs.battery.charging.wired", "Sạc có dây", numeric=True),
            _spec("specs.battery.charging.wireless", "Sạc không dây", numeric=True),
        )),
        SpecCategory(name="Kết nối", specs=(
            _spec("specs.connectivity.network", "Mạng"),
            _spec("specs.connectivity.ports", "Cổng kết nối"),
        )),
        SpecCategory(name="Thông tin khác", specs=(
            _spec("specs.os", "Hệ điều hành"),
            _spec("specs.dimensions", "Kích thước"),
            _spec("specs.weight", "Trọng lượng", numeric=True, lower=True),
        )),
    ),
)


def load_catalog(path: Union[str, Path]) -> SpecCatalog:
    """Load and validate a catalog from a JSON file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
        catalog = SpecCatalog.model_validate_json(raw)
    except OSError as e:
        logger.warning(f"Cannot read spec catalog {path}: {e}")
        raise CatalogLoadError(f"Cannot read spec catalog {path}") from e
    except ValidationError as e:
        logger.warning(f"Invalid spec catalog {path}: {e.error_count()} errors")
        raise CatalogLoadError(f"Invalid spec catalog {path}: {e}") from e

    logger.debug(
        f"Loaded spec catalog {path} (version {catalog.version}, "
        f"{len(catalog.all_keys())} specs)"
    )
    return catalog


@lru_cache
def get_catalog() -> SpecCatalog:
    """Process-wide catalog, loaded once from settings."""
    catalog_path = get_settings().catalog_path
    if catalog_path:
        return load_catalog(catalog_path)
    return DEFAULT_CATALOG
