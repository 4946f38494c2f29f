"""ETL package - load the postcode/district/MP dataset into the database."""

from etl.load import load_dataset
from etl.schemas import Dataset
from etl.validation import validate_dataset

__all__ = [
    "Dataset",
    "load_dataset",
    "validate_dataset",
]
