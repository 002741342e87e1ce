"""
ChronoParts - Serialisation Module.

This module provides JSON persistence for DateTime values. A document
stores the authoritative timestamp and time zone offset together with
every calendar field, so that it stays readable by humans and external
systems. On load the fields are fed back through DateTime.from_parts and
must agree with the stored timestamp: an edited or corrupted document
is rejected with the error naming the first inconsistent field.

Document Layout:
    {
        "metadata": {"version": "0.1.0", "generated_by": "ChronoParts"},
        "timestamp": 1709164800000,
        "time_zone_offset": 0,
        "iso_string": "2024-02-29T00:00:00.000+00:00",
        "iso_week_string": "2024-W09-4",
        "parts": {"year": 2024, "ordinal_day": 60, ...}
    }

Classes:
    DateTimeEncoder: JSON encoder for DateTime values and records.
    DateTimeSerialiser: Manages JSON serialisation and persistence.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from chronoparts import __version__
from chronoparts.config import Settings, default_settings
from chronoparts.date_time import DateTime
from chronoparts.schema import AddressingScheme, DateTimeParts
from chronoparts.validator import Result, check_value

logger = logging.getLogger(__name__)


class DateTimeEncoder(json.JSONEncoder):
    """
    Custom JSON encoder for the ChronoParts value types.

    DateTime values are encoded as ISO 8601 strings, DateTimeParts as
    objects holding their supplied fields.
    """

    def default(self, obj: Any) -> Any:
        """
        Encode DateTime, DateTimeParts and AddressingScheme objects.

        Args:
            obj: Object to encode.

        Returns:
            JSON-serialisable representation.
        """
        if isinstance(obj, DateTime):
            return obj.to_iso_string()
        if isinstance(obj, DateTimeParts):
            return obj.as_dict()
        if isinstance(obj, AddressingScheme):
            return obj.value
        return super().default(obj)


class DateTimeSerialiser:
    """
    Manages JSON serialisation and persistence of DateTime values.

    Example:
        >>> serialiser = DateTimeSerialiser()
        >>> json_str = serialiser.serialise(date_time)
        >>> restored = serialiser.deserialise(json_str).unwrap()
        >>> assert restored == date_time
    """

    def __init__(self, version: Optional[str] = None, settings: Optional[Settings] = None):
        """
        Initialises the DateTimeSerialiser.

        Args:
            version: Version identifier written to documents.
                     Defaults to package version.
            settings: Settings providing the clock used for file names.
        """
        self._version = version or __version__
        self._settings = settings or default_settings

    def serialise(self, date_time: DateTime) -> str:
        """
        Serialises a DateTime to a JSON string.

        Args:
            date_time: DateTime to serialise.

        Returns:
            JSON string representation.
        """
        data = self._date_time_to_dict(date_time)
        return json.dumps(data, cls=DateTimeEncoder, indent=2)

    def deserialise(self, json_str: str) -> Result[DateTime]:
        """
        Deserialises a JSON string to a DateTime.

        Args:
            json_str: JSON string to deserialise.

        Returns:
            Result holding the DateTime, or the error raised by the first
            field that is out of range or disagrees with the others.

        Raises:
            json.JSONDecodeError: If JSON is malformed.
            KeyError: If required fields are missing.
            TypeError: If parts holds an unknown field.
        """
        data = json.loads(json_str)
        return self._dict_to_date_time(data)

    def save_to_file(self, date_time: DateTime, file_path: Union[str, Path]) -> None:
        """
        Saves a DateTime to a JSON file.

        Args:
            date_time: DateTime to save.
            file_path: Output file path.

        Raises:
            PermissionError: If file cannot be written.
        """
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        json_str = self.serialise(date_time)
        file_path.write_text(json_str, encoding="utf-8")
        logger.info("Saved %s to %s", date_time, file_path)

    def load_from_file(self, file_path: Union[str, Path]) -> Result[DateTime]:
        """
        Loads a DateTime from a JSON file.

        Args:
            file_path: Path to JSON file.

        Returns:
            Result holding the loaded DateTime.

        Raises:
            FileNotFoundError: If file does not exist.
            json.JSONDecodeError: If JSON is malformed.
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"DateTime file not found: {file_path}")

        json_str = file_path.read_text(encoding="utf-8")
        return self.deserialise(json_str)

    def _date_time_to_dict(self, date_time: DateTime) -> Dict[str, Any]:
        """
        Converts a DateTime to a dictionary for JSON serialisation.

        The time zone offset is stored once, at top level.
        """
        parts = date_time.to_parts()
        parts.time_zone_offset = None

        return {
            "metadata": {
                "version": self._version,
                "generated_by": "ChronoParts",
            },
            "timestamp": date_time.timestamp,
            "time_zone_offset": date_time.time_zone_offset,
            "iso_string": date_time,
            "iso_week_string": date_time.to_iso_week_string(),
            "parts": parts,
        }

    def _dict_to_date_time(self, data: Dict[str, Any]) -> Result[DateTime]:
        """
        Rebuilds a DateTime from its fields and checks it against the timestamp.
        """
        parts = DateTimeParts(**data["parts"])
        parts.time_zone_offset = data["time_zone_offset"]
        timestamp = data["timestamp"]

        def check_timestamp(date_time: DateTime) -> Result[DateTime]:
            error = check_value(timestamp, "timestamp", date_time.timestamp)
            if error is not None:
                return Result.fail(error)
            return Result.ok(date_time)

        result = DateTime.from_parts(**parts.as_dict()).and_then(check_timestamp)
        if not result.is_ok:
            logger.warning("Rejected DateTime document: %s", result.error)
        return result

    def generate_filename(self, prefix: str = "datetime") -> str:
        """
        Generates a timestamped filename for DateTime files.

        Args:
            prefix: Filename prefix. Defaults to "datetime".

        Returns:
            Filename like "datetime_2024-12-18_143052.json", in the
            time zone of the serialiser's settings.
        """
        now = DateTime.now(settings=self._settings).unwrap()
        return (
            f"{prefix}_{now.year:04d}-{now.month:02d}-{now.month_day:02d}"
            f"_{now.hour24:02d}{now.minute:02d}{now.second:02d}.json"
        )
