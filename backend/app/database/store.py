"""
Project document store.

Each project is persisted as one row: scalar columns for lookup and the embedded
collections as a single JSON document. Every write rewrites the whole document.
"""

import json
from datetime import datetime, timezone

import aiosqlite

from app.errors import ConflictError, NotFoundError
from app.logging import get_logger
from app.models import Project, ProjectCollection

logger = get_logger('database.store')

FILTER_COLUMNS = {"id", "name", "owner_id"}
DOCUMENT_FIELDS = {collection.value for collection in ProjectCollection}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _row_to_project(row: dict) -> Project:
    document = json.loads(row["document"] or "{}")
    return Project(
        id=row["id"],
        name=row["name"],
        owner_id=row["owner_id"],
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        **{key: value for key, value in document.items() if key in DOCUMENT_FIELDS},
    )


def _dump_document(project: Project) -> str:
    return json.dumps(project.model_dump(mode="json", include=DOCUMENT_FIELDS))


def _where_clause(filters: dict) -> tuple[str, list]:
    unknown = set(filters) - FILTER_COLUMNS
    if unknown:
        raise ValueError(f"Unsupported project filter: {', '.join(sorted(unknown))}")
    if not filters:
        return "", []
    clause = " AND ".join(f"{column} = ?" for column in filters)
    return f" WHERE {clause}", [str(value) for value in filters.values()]


class ProjectStore:
    """Whole-document persistence for project aggregates."""

    def __init__(self, db_path: str, optimistic: bool = False):
        self.db_path = db_path
        self.optimistic = optimistic

    async def _get_db(self) -> aiosqlite.Connection:
        db = await aiosqlite.connect(self.db_path)
        db.row_factory = aiosqlite.Row
        return db

    async def find_by_id(self, project_id: str) -> Project | None:
        return await self.find_one(id=project_id)

    async def find_one(self, **filters) -> Project | None:
        where, params = _where_clause(filters)
        db = await self._get_db()
        try:
            cursor = await db.execute(f"SELECT * FROM projects{where} LIMIT 1", params)
            row = await cursor.fetchone()
            return _row_to_project(dict(row)) if row else None
        finally:
            await db.close()

    async def find(self, **filters) -> list[Project]:
        where, params = _where_clause(filters)
        db = await self._get_db()
        try:
            cursor = await db.execute(
                f"SELECT * FROM projects{where} ORDER BY created_at ASC, rowid ASC",
                params,
            )
            rows = await cursor.fetchall()
            return [_row_to_project(dict(r)) for r in rows]
        finally:
            await db.close()

    async def insert(self, project: Project) -> Project:
        now = _now()
        db = await self._get_db()
        try:
            await db.execute(
                """INSERT INTO projects (id, owner_id, name, document, version, created_at, updated_at)
                   VALUES (?, ?, ?, ?, ?, ?, ?)""",
                (project.id, str(project.owner_id), project.name,
                 _dump_document(project), 0, now.isoformat(), now.isoformat()),
            )
            await db.commit()
        except aiosqlite.IntegrityError as exc:
            raise ConflictError(
                "A project with this name already exists for your account."
            ) from exc
        finally:
            await db.close()

        return project.model_copy(update={"version": 0, "created_at": now, "updated_at": now})

    async def save(self, project: Project) -> Project:
        """
        Rewrite the stored document with the in-memory project.

        Without optimistic concurrency the last writer wins. With it enabled, the
        write only lands if nobody saved since ``project`` was read.
        """
        now = _now()
        query = """UPDATE projects
                   SET name = ?, document = ?, version = ?, updated_at = ?
                   WHERE id = ?"""
        params = [project.name, _dump_document(project), project.version + 1, now.isoformat(), project.id]
        if self.optimistic:
            query += " AND version = ?"
            params.append(project.version)

        db = await self._get_db()
        try:
            cursor = await db.execute(query, params)
            await db.commit()
            updated = cursor.rowcount > 0
        except aiosqlite.IntegrityError as exc:
            raise ConflictError(
                "A project with this name already exists for your account."
            ) from exc
        finally:
            await db.close()

        if not updated:
            if self.optimistic and await self.find_by_id(project.id):
                logger.warning(f"Version conflict saving project {project.id[:8]}")
                raise ConflictError("The project was modified by another request. Reload and retry.")
            raise NotFoundError(f'Project with ID "{project.id}" not found.')

        return project.model_copy(update={"version": project.version + 1, "updated_at": now})

    async def delete_by_id(self, project_id: str) -> None:
        db = await self._get_db()
        try:
            await db.execute("DELETE FROM projects WHERE id = ?", (project_id,))
            await db.commit()
        finally:
            await db.close()
