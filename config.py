import os
import pathlib
import tomllib

DEFAULT_CONFIG = {
    "source": {
        "location": "",
        "timeout": 10,
        "retries": 3,
    },
    "export": {
        "output_dir": "",
        "formats": ["xml"],
    },
}

EXPORT_FORMATS = ("xml", "html", "md")


def _deep_merge_dict(base: dict, override: dict) -> dict:
    """
    simple recursive dict merge
    values from override will cover base
    """
    result = dict(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = _deep_merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str | os.PathLike | None = None) -> dict:
    """
    get config from config.toml
    use base config if the file is not found
    """
    base_cfg = DEFAULT_CONFIG

    if path is None:
        path = pathlib.Path("config.toml")
    else:
        path = pathlib.Path(path)

    if path.is_file():
        with path.open("rb") as f:
            file_cfg = tomllib.load(f)
        return _deep_merge_dict(base_cfg, file_cfg)

    return base_cfg


def get_source_location(cfg: dict) -> str:
    """
    get the XML document location (path or http url)
    env var XMLVIEW_SOURCE wins over the config file
    """
    env_location = os.environ.get("XMLVIEW_SOURCE", "")
    if env_location:
        return env_location

    return cfg.get("source", {}).get("location", "") or ""


def _positive_int(value, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def get_timeout(cfg: dict) -> int:
    raw = cfg.get("source", {}).get("timeout")
    return _positive_int(raw, DEFAULT_CONFIG["source"]["timeout"])


def get_retries(cfg: dict) -> int:
    raw = cfg.get("source", {}).get("retries")
    return _positive_int(raw, DEFAULT_CONFIG["source"]["retries"])


def get_export_formats(cfg: dict) -> list[str]:
    """
    get export formats: any of "xml" | "html" | "md"
    unknown entries are ignored, falls back to ["xml"]
    """
    raw = cfg.get("export", {}).get("formats") or []
    if isinstance(raw, str):
        raw = [raw]

    formats: list[str] = []
    for item in raw:
        fmt = str(item).lower().strip()
        if fmt in EXPORT_FORMATS and fmt not in formats:
            formats.append(fmt)

    return formats or list(DEFAULT_CONFIG["export"]["formats"])


def get_output_dir(cfg: dict) -> pathlib.Path:
    """
    get export directory from config
    use current working dir if not set
    """
    raw = cfg.get("export", {}).get("output_dir", "") or ""
    if not raw:
        return pathlib.Path.cwd()
    return pathlib.Path(raw).expanduser().resolve()
