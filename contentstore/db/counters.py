"""Visitor counter storage."""

from psycopg import Connection


class CounterManager:
    """Manage visitor counters in database."""

    def increment(self, conn: Connection, counter_id: str) -> int:
        """
        Increment a counter, creating it at 1.

        Returns:
            Count after the increment
        """
        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO counters (counter_id, count)
                VALUES (%s, 1)
                ON CONFLICT (counter_id) DO UPDATE SET
                    count = counters.count + 1
                RETURNING count
                """,
                (counter_id,),
            )
            row = cur.fetchone()

        conn.commit()
        return row["count"]
