from pathlib import Path
import json
import logging
from typing import Dict, Any

from pydantic import ValidationError

from app.core.config import settings
from app.core.errors import CustomerStoreError
from app.schemas.customer_schemas import CustomerCollection

logger = logging.getLogger(__name__)


def data_path() -> Path:
    # resolved per call so the location can be repointed at runtime
    return Path(settings.DATA_FILE)


def ensure_data_file_exists() -> None:
    """
    Creates the data file (and its directory) holding an empty collection
    if it is not there yet.
    """
    path = data_path()
    if path.exists():
        return

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(CustomerCollection(customers=[]).model_dump(), f)
    logger.info(f"Created empty data file at {path}")


def read_data() -> Dict[str, Any]:
    """
    Loads the whole collection from disk.
    """
    try:
        ensure_data_file_exists()
        with open(data_path(), "r", encoding="utf-8") as f:
            raw = json.load(f)
        return CustomerCollection.model_validate(raw).model_dump()
    except (OSError, ValueError, ValidationError) as e:
        raise CustomerStoreError(f"could not read {data_path()}: {e}") from e


def write_data(data: Dict[str, Any]) -> None:
    """
    Overwrites the data file with the full collection.
    """
    try:
        with open(data_path(), "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except (OSError, TypeError) as e:
        raise CustomerStoreError(f"could not write {data_path()}: {e}") from e
