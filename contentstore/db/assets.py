"""Binary asset storage."""

import logging
from datetime import datetime
from typing import Dict, Optional

from psycopg import Connection

from ..models import AssetUpload

logger = logging.getLogger(__name__)


class AssetStorage:
    """Store and fetch binary assets."""

    def store_asset(
        self,
        conn: Connection,
        asset_id: str,
        upload: AssetUpload,
        updated_at: datetime,
    ) -> None:
        """Read the whole upload and replace every column of the asset row."""
        data = upload.read()

        with conn.cursor() as cur:
            cur.execute(
                """
                INSERT INTO assets (asset_id, mime_type, updated_at, size, data)
                VALUES (%s, %s, %s, %s, %s)
                ON CONFLICT (asset_id) DO UPDATE SET
                    mime_type = EXCLUDED.mime_type,
                    updated_at = EXCLUDED.updated_at,
                    size = EXCLUDED.size,
                    data = EXCLUDED.data
                """,
                (asset_id, upload.content_type, updated_at, upload.size, data),
            )

        conn.commit()
        logger.debug("Stored asset %s (%d bytes)", asset_id, upload.size)

    def get_asset(self, conn: Connection, asset_id: str) -> Optional[Dict]:
        """Get raw asset row."""
        with conn.cursor() as cur:
            cur.execute(
                """
                SELECT asset_id, mime_type, updated_at, size, data
                FROM assets
                WHERE asset_id = %s
                """,
                (asset_id,),
            )
            return cur.fetchone()
