# unit_manager/persistence.py
from __future__ import annotations

import json
import logging
import os
import shutil
import tempfile
import threading
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Union

import jsonschema

from .dimensions import DIMENSIONS, Force, Length

log = logging.getLogger(__name__)

UNITS_FILENAME = "units.json"
UNITS_VERSION = 1

UNITS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "required": ["version", "units"],
    "properties": {
        "version": {"type": "integer"},
        "units": {
            "type": "object",
            "properties": {
                d.label(): {"type": "string", "enum": d.all_abbrs()} for d in DIMENSIONS
            },
            "additionalProperties": False,
        },
    },
}

# Upper-case symbols written by older releases -> current abbreviations
_LEGACY_SYMBOLS = {
    "MM": "mm",
    "CM": "cm",
    "M": "m",
    "IN": "in",
    "FT": "ft",
    "N": "N",
    "KN": "kN",
    "LBF": "lbf",
    "KIP": "kip",
    "KIPS": "kip",
    "KGF": "kgf",
}


def _expand(path: Union[str, Path]) -> Path:
    return Path(os.path.expanduser(str(path))).resolve()


def default_units() -> Dict[str, str]:
    units = {d.label(): d.default().abbr for d in DIMENSIONS}
    units[Length.label()] = Length.FEET.abbr
    units[Force.label()] = Force.KIPS.abbr
    return units


class ConfigError(RuntimeError):
    pass


class ConfigManager:
    """
    JSON persistence with:
    - Atomic writes (tempfile + os.replace)
    - Schema validation (jsonschema)
    - Versioning + simple migration hooks
    - Thread-safety across calls
    - Automatic backup (.bak) on write

    Typical use:
        cfg = ConfigManager(base_dir=tmp)
        prefs = cfg.load_unit_preferences()
        cfg.save_unit_preferences(units)   # dict or UnitSystem
    """

    def __init__(
        self,
        app_name: str = "unit_manager",
        base_dir: Optional[Union[str, Path]] = None,
    ):
        self._lock = threading.RLock()
        self.app_name = app_name
        self.base_dir = _expand(base_dir or Path.home() / f".{app_name}")
        self.base_dir.mkdir(parents=True, exist_ok=True)

    # ------------- unit preferences -------------

    def load_unit_preferences(self) -> Dict[str, Any]:
        default = {"version": UNITS_VERSION, "units": default_units()}
        return self.load(
            UNITS_FILENAME,
            default=default,
            version=UNITS_VERSION,
            schema=UNITS_SCHEMA,
            migrate=self._migrate_units,
        )

    def save_unit_preferences(self, data: Any) -> None:
        """
        Persist unit preferences. Accepts a UnitSystem (anything with as_dict()),
        a {"units": {...}} document, or a bare {label: abbr} mapping.
        """
        if hasattr(data, "as_dict") and callable(getattr(data, "as_dict")):
            units = data.as_dict()
        elif isinstance(data, dict):
            units = data.get("units", data)
        else:
            raise ConfigError("unit preferences must be a dict or an object with as_dict().")

        payload = {"version": UNITS_VERSION, "units": dict(units)}
        try:
            jsonschema.validate(instance=payload, schema=UNITS_SCHEMA)
        except jsonschema.ValidationError as e:
            raise ConfigError(f"Invalid unit preferences: {e.message}") from e

        self.save(UNITS_FILENAME, payload)

    # ------------- generic API -------------

    def load(
        self,
        filename: str,
        *,
        default: Any,
        version: int,
        migrate: Optional[Callable[[dict, int, int], dict]] = None,
        schema: Optional[Dict[str, Any]] = None,
        on_corruption: str = "backup_then_reset",  # or "raise"
    ) -> Any:
        """
        Load a JSON file with optional migration & schema validation.
        - default: returned if missing/corrupt/invalid (and written to disk)
        - version: current document version
        - migrate: fn(old_data, old_version, new_version) -> new_data
        - schema: jsonschema the (migrated) document must satisfy
        - on_corruption: "backup_then_reset" | "raise"
        """
        path = self._path(filename)
        with self._lock:
            if not path.exists():
                self._atomic_write(path, default)
                return default

            try:
                data = self._read_json(path)
            except (OSError, ValueError) as e:
                if on_corruption == "raise":
                    raise ConfigError(f"Failed to read {path}: {e}") from e
                log.warning("Unreadable %s (%s); resetting to defaults", path, e)
                self._backup_corrupt(path)
                self._atomic_write(path, default)
                return default

            # Version / migration
            old_version = data.get("version", 0) if isinstance(data, dict) else 0
            if isinstance(old_version, bool) or not isinstance(old_version, int):
                if on_corruption == "raise":
                    raise ConfigError(f"Bad version {old_version!r} in {path}")
                log.warning("Bad version %r in %s; resetting to defaults", old_version, path)
                self._backup_corrupt(path)
                self._atomic_write(path, default)
                return default
            if old_version != version:
                if migrate:
                    try:
                        data = migrate(data if isinstance(data, dict) else {}, old_version, version)
                    except Exception as e:
                        log.warning("Migration of %s v%s failed (%s); resetting", path, old_version, e)
                        self._backup_corrupt(path, suffix=".migrate.bak")
                        self._atomic_write(path, default)
                        return default
                    log.info("Migrated %s from v%s to v%s", path.name, old_version, version)
                else:
                    # No migration provided: assume breaking change -> reset to default
                    self._backup_corrupt(path, suffix=f".v{old_version}.bak")
                    data = default
                # ensure target version is stamped
                if isinstance(data, dict):
                    data["version"] = version
                self._atomic_write(path, data)

            if schema is not None:
                try:
                    jsonschema.validate(instance=data, schema=schema)
                except jsonschema.ValidationError as e:
                    if on_corruption == "raise":
                        raise ConfigError(f"Schema validation failed for {filename}: {e.message}") from e
                    log.warning("Schema validation failed for %s: %s", filename, e.message)
                    self._backup_corrupt(path, suffix=".invalid.bak")
                    self._atomic_write(path, default)
                    return default

            return data

    def save(self, filename: str, data: Any) -> None:
        """Save a JSON object with atomic replace and backup of the previous file."""
        if not isinstance(data, dict):
            raise ConfigError("Only a dict can be saved as JSON.")
        path = self._path(filename)
        with self._lock:
            self._atomic_write(path, data, make_backup=True)

    # ------------- internal utils -------------

    def _path(self, filename: str) -> Path:
        return self.base_dir / filename

    def _read_json(self, path: Path) -> Any:
        return json.loads(path.read_text(encoding="utf-8"))

    def _atomic_write(self, path: Path, data: Any, make_backup: bool = False) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # Write to temp file first
        fd, tmp = tempfile.mkstemp(prefix=path.stem + ".", suffix=".tmp", dir=str(path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            if path.exists() and make_backup:
                backup = path.with_suffix(path.suffix + ".bak")
                shutil.copy2(path, backup)
            os.replace(tmp, path)  # atomic on POSIX/NTFS
        finally:
            # If replace succeeded, tmp is gone. If failed, ensure cleanup.
            if os.path.exists(tmp):
                os.remove(tmp)

    def _backup_corrupt(self, path: Path, *, suffix: str = ".bak") -> None:
        try:
            shutil.copy2(path, path.with_suffix(path.suffix + suffix))
        except OSError as e:
            log.warning("Could not back up %s: %s", path, e)

    # ------------- migrations -------------

    def _migrate_units(self, old: dict, old_v: int, new_v: int) -> dict:
        data = dict(old) if isinstance(old, dict) else {}
        raw = data.get("units")
        if not isinstance(raw, dict):
            raw = {}

        # ---- Legacy top-level keys
        if "length_unit" in data and "length" not in raw:
            raw["length"] = data.pop("length_unit")
        if "force_unit" in data and "force" not in raw:
            raw["force"] = data.pop("force_unit")

        units = default_units()
        for dim in DIMENSIONS:
            for key in (dim.label(), dim.label().lower()):
                if key not in raw:
                    continue
                text = str(raw[key])
                unit = dim.parse(text) or dim.parse(_LEGACY_SYMBOLS.get(text.upper(), ""))
                if unit is not None:
                    units[dim.label()] = unit.abbr
                else:
                    log.info("Dropping unknown %s unit %r from preferences", dim.label(), text)
                break

        return {"version": new_v, "units": units}
