from typing import Any, Dict, List, Optional

from django.db import connection


def fetch_all(sql: str, params: list) -> List[Dict[str, Any]]:
    with connection.cursor() as cur:
        cur.execute(sql, params)
        cols = [c[0] for c in cur.description] if cur.description else []
        return [dict(zip(cols, r)) for r in cur.fetchall()]


def fetch_one(sql: str, params: list) -> Optional[Dict[str, Any]]:
    rows = fetch_all(sql, params)
    return rows[0] if rows else None


def increment_and_fetch(table: str, column: str, where: str, params: list) -> Optional[int]:
    """
    Incrementa ``column`` en una sola sentencia y devuelve el nuevo valor.
    En PostgreSQL el UPDATE toma el lock de fila hasta el commit, por lo que
    escritores concurrentes sobre la misma fila quedan serializados.
    Debe llamarse dentro de ``transaction.atomic``.
    """
    sql = (
        f"UPDATE {table} SET {column} = {column} + 1 "
        f"WHERE {where} RETURNING {column}"
    )
    with connection.cursor() as cur:
        cur.execute(sql, params)
        row = cur.fetchone()
    return row[0] if row else None
