"""Restaurant store with history-aware lunch rolling."""

import logging
import random
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from lunch.config import Settings, get_settings
from lunch.database import create_db_engine, init_db
from lunch.exceptions import (
    DuplicateNameError,
    InvalidInputError,
    NoRestaurantsFoundError,
    StorageError,
    StorageInitError,
    StorageReadError,
    StorageWriteError,
)
from lunch.models.enums import Category
from lunch.models.recent_selection import RecentSelection
from lunch.models.restaurant import Restaurant
from lunch.paths import database_url_for, default_database_path
from lunch.services.seed import DEFAULT_RESTAURANTS

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_SIZE = 14


class RestaurantStore:
    """Owns the restaurant list and the recent-selection history.

    Every operation takes the store lock and runs in its own transaction, so
    concurrent callers are serialised and a roll's insert-then-prune is atomic.
    """

    def __init__(
        self,
        engine: Engine,
        history_size: int = DEFAULT_HISTORY_SIZE,
        rng: random.Random | None = None,
    ):
        if history_size < 1:
            raise ValueError("history_size must be at least 1")
        self.engine = engine
        self.history_size = history_size
        self.rng = rng or random.Random()  # noqa: S311
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
        )
        self._lock = threading.Lock()

    @classmethod
    def open(cls, settings: Settings | None = None) -> "RestaurantStore":
        """Open the configured database, creating and seeding it on first launch."""
        settings = settings or get_settings()
        database_url = settings.database_url

        try:
            if database_url is None:
                path = default_database_path(settings.data_dir)
                path.parent.mkdir(parents=True, exist_ok=True)
                database_url = database_url_for(path)
            engine = create_db_engine(database_url)
            init_db(engine)
        except (OSError, SQLAlchemyError) as e:
            logger.error(f"Failed to initialize database at {database_url}: {e}")
            raise StorageInitError(f"Could not open database: {e}") from e

        logger.info(f"Opened restaurant database at {engine.url}")
        store = cls(engine, history_size=settings.history_size)

        if settings.seed_on_first_launch:
            try:
                store.seed(DEFAULT_RESTAURANTS)
            except StorageError as e:
                store.close()
                raise StorageInitError(f"Could not seed database: {e}") from e

        return store

    @classmethod
    def in_memory(
        cls, history_size: int = DEFAULT_HISTORY_SIZE, rng: random.Random | None = None
    ) -> "RestaurantStore":
        """Create an empty, unseeded store backed by an in-memory database."""
        engine = create_db_engine("sqlite://")
        init_db(engine)
        return cls(engine, history_size=history_size, rng=rng)

    def close(self) -> None:
        """Release all database connections."""
        self.engine.dispose()

    @contextmanager
    def _session(self, error: type[StorageError]) -> Iterator[Session]:
        """Yield a locked session, translating database failures into `error`."""
        with self._lock:
            db = self._session_factory()
            try:
                yield db
            except SQLAlchemyError as e:
                db.rollback()
                logger.warning(f"Database operation failed: {e}")
                raise error(str(e)) from e
            finally:
                db.close()

    # Reads

    def list_all(self) -> list[Restaurant]:
        """Return all restaurants ordered by name."""
        with self._session(StorageReadError) as db:
            return db.query(Restaurant).order_by(Restaurant.name).all()

    def list_by_category(self, category: str) -> list[Restaurant]:
        """Return restaurants in a category (case-insensitive), ordered by name."""
        with self._session(StorageReadError) as db:
            return self._query_category(db, category)

    def recent_selections(self, limit: int | None = None) -> list[str]:
        """Return names from the selection history, most recent first."""
        with self._session(StorageReadError) as db:
            query = db.query(RecentSelection.name).order_by(RecentSelection.id.desc())
            if limit is not None:
                query = query.limit(limit)
            return [name for (name,) in query.all()]

    # Writes

    def add(self, name: str, category: str) -> Restaurant:
        """Add a restaurant.

        Raises:
            InvalidInputError: name is blank or category is not Cheap/Normal.
            DuplicateNameError: a restaurant with this exact name exists.
        """
        name, parsed = _validate(name, category)

        with self._session(StorageWriteError) as db:
            if db.get(Restaurant, name) is not None:
                raise DuplicateNameError(name)

            restaurant = Restaurant(name=name, category=parsed.value)
            db.add(restaurant)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise DuplicateNameError(name) from None

        logger.info(f"Added restaurant '{name}' ({parsed.value})")
        return restaurant

    def delete(self, name: str) -> None:
        """Remove a restaurant if present. History entries are left in place."""
        with self._session(StorageWriteError) as db:
            deleted = (
                db.query(Restaurant)
                .filter(Restaurant.name == name)
                .delete(synchronize_session=False)
            )
            db.commit()

        if deleted:
            logger.info(f"Deleted restaurant '{name}'")
        else:
            logger.debug(f"Delete of unknown restaurant '{name}' ignored")

    def roll(self, category: str) -> Restaurant:
        """Pick a random restaurant in a category and record it in the history.

        The previous pick is excluded unless it is the only candidate.

        Raises:
            NoRestaurantsFoundError: the category has no restaurants.
        """
        with self._session(StorageWriteError) as db:
            candidates = self._query_category(db, category)
            if not candidates:
                logger.debug(f"Roll for '{category}' found no restaurants")
                raise NoRestaurantsFoundError(category)

            last = (
                db.query(RecentSelection.name)
                .order_by(RecentSelection.id.desc())
                .first()
            )
            last_name = last[0] if last else None

            eligible = [r for r in candidates if r.name != last_name] or candidates
            chosen = self.rng.choice(eligible)

            db.add(RecentSelection(name=chosen.name, selected_at=datetime.now(UTC)))
            db.flush()
            self._prune_history(db)
            db.commit()

        logger.info(f"Rolled '{chosen.name}' from {len(eligible)} eligible in '{category}'")
        return chosen

    def clear(self) -> None:
        """Delete every restaurant and the whole selection history."""
        with self._session(StorageWriteError) as db:
            db.query(RecentSelection).delete(synchronize_session=False)
            db.query(Restaurant).delete(synchronize_session=False)
            db.commit()

        logger.info("Cleared restaurants and selection history")

    def seed(self, restaurants: Iterable[tuple[str, str]]) -> int:
        """Insert restaurants only if the store is empty. Returns the number added."""
        entries = [_validate(name, category) for name, category in restaurants]

        with self._session(StorageWriteError) as db:
            if db.query(Restaurant).count() > 0:
                return 0
            db.add_all(Restaurant(name=name, category=c.value) for name, c in entries)
            db.commit()

        logger.info(f"Seeded {len(entries)} restaurants")
        return len(entries)

    # Helpers

    def _query_category(self, db: Session, category: str) -> list[Restaurant]:
        normalized = category.strip().lower()
        return (
            db.query(Restaurant)
            .filter(func.lower(Restaurant.category) == normalized)
            .order_by(Restaurant.name)
            .all()
        )

    def _prune_history(self, db: Session) -> None:
        """Delete all but the newest `history_size` selections."""
        keep = [
            id_
            for (id_,) in db.query(RecentSelection.id)
            .order_by(RecentSelection.id.desc())
            .limit(self.history_size)
            .all()
        ]
        db.query(RecentSelection).filter(RecentSelection.id.not_in(keep)).delete(
            synchronize_session=False
        )


def _validate(name: str, category: str) -> tuple[str, Category]:
    """Trim the name and parse the category, rejecting bad input."""
    name = (name or "").strip()
    if not name:
        raise InvalidInputError("Restaurant name cannot be empty")

    parsed = Category.parse(category or "")
    if parsed is None:
        raise InvalidInputError(f"Unknown category '{category}' (expected Cheap or Normal)")
    return name, parsed
