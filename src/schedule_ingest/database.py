"""SQLAlchemy store for finished schedule entries.

One ``schedule`` table; start and end are stored as ISO-8601 text so the
rows read the same from SQLite tooling as from this module.
"""

from datetime import datetime

from sqlalchemy import Column, Integer, String, create_engine, delete, select
from sqlalchemy.orm import declarative_base, sessionmaker

from schedule_ingest.logging import get_logger
from schedule_ingest.models import ScheduleEntry

log = get_logger(__name__)

Base = declarative_base()


class ScheduleRow(Base):
    __tablename__ = "schedule"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    start_time = Column("startTime", String, nullable=False)
    end_time = Column("endTime", String, nullable=False)

    @classmethod
    def from_entry(cls, entry: ScheduleEntry) -> "ScheduleRow":
        return cls(
            name=entry.name,
            start_time=entry.start_time.isoformat(),
            end_time=entry.end_time.isoformat(),
        )

    def to_entry(self) -> ScheduleEntry:
        return ScheduleEntry(
            name=self.name,
            start_time=datetime.fromisoformat(self.start_time),
            end_time=datetime.fromisoformat(self.end_time),
        )


class ScheduleDatabase:
    """Persistence for schedule entries."""

    def __init__(self, database_url: str = "sqlite:///schedule.db") -> None:
        connect_args = (
            {"check_same_thread": False} if database_url.startswith("sqlite") else {}
        )
        self.engine = create_engine(database_url, future=True, connect_args=connect_args)
        self.Session = sessionmaker(
            bind=self.engine, expire_on_commit=False, autoflush=False
        )
        Base.metadata.create_all(self.engine)
        log.info("database_initialized", url=self.engine.url.render_as_string())

    def insert(self, entry: ScheduleEntry) -> int:
        """Insert one entry and return its row id."""
        row = ScheduleRow.from_entry(entry)
        with self.Session.begin() as session:
            session.add(row)
            session.flush()
            row_id = row.id
        return row_id

    def insert_many(self, entries: list[ScheduleEntry]) -> int:
        """Insert entries in a single transaction. Returns the number inserted."""
        with self.Session.begin() as session:
            session.add_all([ScheduleRow.from_entry(e) for e in entries])
        log.info("entries_inserted", count=len(entries))
        return len(entries)

    def get_all(self) -> list[tuple[int, ScheduleEntry]]:
        """All stored entries as (id, entry), in insertion order."""
        with self.Session() as session:
            rows = session.scalars(select(ScheduleRow).order_by(ScheduleRow.id)).all()
            return [(row.id, row.to_entry()) for row in rows]

    def get_by_id(self, row_id: int) -> ScheduleEntry | None:
        with self.Session() as session:
            row = session.get(ScheduleRow, row_id)
            return row.to_entry() if row is not None else None

    def clear_all(self) -> None:
        """Delete every stored entry."""
        with self.Session.begin() as session:
            session.execute(delete(ScheduleRow))
        log.info("entries_cleared")

    def close(self) -> None:
        self.engine.dispose()
