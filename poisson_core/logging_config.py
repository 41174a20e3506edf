import logging
from pathlib import Path
from datetime import datetime, timezone
from typing import Optional

from . import settings


def setup_logging(
    level: Optional[str] = None,
    component: str = "poisson",
    base_dir: str | Path | None = None,
) -> Optional[Path]:
    """
    Configure logging:
      - Console (stderr)
      - Daily log file in <base_dir>/<component>/YYYY-MM-DD.log (UTC date),
        only when base_dir is given

    Returns:
      Path to the daily log file, or None when logging to the console only.
    """

    level = level or settings.LOG_LEVEL
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s")
    sh = logging.StreamHandler()
    sh.setFormatter(fmt)
    root.addHandler(sh)

    if base_dir is None:
        return None

    log_dir = Path(base_dir) / component
    log_dir.mkdir(parents=True, exist_ok=True)
    date_str = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    log_path = log_dir / f"{date_str}.log"

    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(fmt)
    root.addHandler(fh)
    return log_path
