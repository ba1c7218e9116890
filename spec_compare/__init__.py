"""
Product spec comparison: turns a spec catalog and a list of product trees
into category-grouped comparison rows with difference and best-value marks.
"""
from .catalog import DEFAULT_CATALOG, CatalogLoadError, get_catalog, load_catalog
from .comparison_engine import (
    ComparisonEngine,
    build_compare_table,
    filter_different_rows,
    find_best_value,
    format_spec_value,
    group_rows_by_category,
    is_different,
    summarize_differences,
)
from .config import Settings, configure_logging, get_settings
from .models import (
    CategoryGroup,
    CompareTableRow,
    ComparisonResult,
    SpecCatalog,
    SpecCategory,
    SpecDefinition,
)
from .values import extract_numeric, resolve_spec_value

__version__ = "1.0.0"
