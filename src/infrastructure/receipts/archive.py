"""
On-disk receipt archive.

Layout::

    <receipts_dir>/<YYYY>/<MM>/semana-<WW>/recibo-<YYYY-MM-DD-HH-MM-SS>.html

``WW`` is the zero-padded week number of the sale timestamp, counting weeks
from Sunday with week 1 being the one that contains 4 January. The path is a pure
function of the sale's creation time, so re-saving a receipt overwrites the
same file.
"""

from datetime import date, datetime, timedelta
from pathlib import Path

from src.config import get_logger, get_settings
from src.core.entities.receipt import ReceiptData, ReceiptFile
from src.core.interfaces.receipts import IReceiptArchive

logger = get_logger(__name__)

FILE_PREFIX = "recibo-"
WEEK_PREFIX = "semana-"


def _first_week_start(year: int) -> date:
    jan4 = date(year, 1, 4)
    return jan4 - timedelta(days=(jan4.weekday() + 1) % 7)


def week_number(day: date) -> int:
    """Sunday-start week of the year; week 1 contains 4 January."""
    start = _first_week_start(day.year + 1)
    if day < start:
        start = _first_week_start(day.year)
        if day < start:
            start = _first_week_start(day.year - 1)
    return (day - start).days // 7 + 1


class ReceiptArchive(IReceiptArchive):
    """Filesystem archive of issued receipt documents."""

    def __init__(self, base_dir: Path | None = None):
        self.base_dir = Path(base_dir or get_settings().receipt.receipts_dir)

    def path_for(self, created_at: datetime) -> Path:
        week = week_number(created_at.date())
        return (
            self.base_dir
            / f"{created_at.year:04d}"
            / f"{created_at.month:02d}"
            / f"{WEEK_PREFIX}{week:02d}"
            / f"{FILE_PREFIX}{created_at.strftime('%Y-%m-%d-%H-%M-%S')}.html"
        )

    def exists(self, created_at: datetime) -> bool:
        return self.path_for(created_at).is_file()

    def save(self, data: ReceiptData, document: str) -> Path:
        path = self.path_for(data.created_at)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document, encoding="utf-8")
        logger.info("receipt_saved", sale_id=data.sale_id, path=str(path))
        return path

    def list_files(self) -> list[ReceiptFile]:
        """All archived receipts, most recently written first."""
        if not self.base_dir.exists():
            return []

        files = []
        for path in self.base_dir.rglob(f"{FILE_PREFIX}*.html"):
            relative = path.relative_to(self.base_dir)
            if len(relative.parts) != 4:
                continue
            year, month, week, _ = relative.parts
            stat = path.stat()
            files.append(
                ReceiptFile(
                    path=path,
                    relative_path=relative.as_posix(),
                    year=year,
                    month=month,
                    week=week.removeprefix(WEEK_PREFIX),
                    size=stat.st_size,
                    modified_at=datetime.fromtimestamp(stat.st_mtime),
                )
            )

        files.sort(key=lambda f: f.modified_at, reverse=True)
        return files
