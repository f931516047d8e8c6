"""
Contract Validation Module

JSON Schema контракты отчётов демо-программ; схемы лежат в schema/.
"""

from .validators import (
    REPORT_SCHEMAS,
    SCHEMA_PACKAGE,
    ReportContract,
    SchemaLoader,
    contract_for,
    default_loader,
    packaged_schema_dir,
    validate_closures_report,
    validate_even_squares_report,
    validate_report,
)

__all__ = [
    # Constants
    "SCHEMA_PACKAGE",
    "REPORT_SCHEMAS",
    # Classes
    "SchemaLoader",
    "ReportContract",
    # Functions
    "packaged_schema_dir",
    "default_loader",
    "contract_for",
    "validate_report",
    "validate_even_squares_report",
    "validate_closures_report",
]
