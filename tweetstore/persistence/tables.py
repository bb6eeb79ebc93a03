"""SQLAlchemy Core definition of the status table.

Every archive table shares one fixed shape; only the name varies, so the
table is built on demand instead of being registered once on a module-level
MetaData.
"""

import sqlalchemy as sa

STATUS_COLUMNS = (
    "id",
    "createdAt",
    "userScreenName",
    "text",
    "editedText",
    "place",
    "userPlace",
    "source",
    "geolocation",
    "lang",
    "favoriteCount",
    "retweetCount",
    "hashtags",
)


def status_table(name: str, metadata: sa.MetaData | None = None) -> sa.Table:
    """Return the status table schema bound to ``name``."""
    return sa.Table(
        name,
        metadata if metadata is not None else sa.MetaData(),
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=False),
        sa.Column("createdAt", sa.Date, nullable=False),
        sa.Column("userScreenName", sa.String(255), nullable=False),
        # full_text can exceed 280 characters (leading mentions, trailing media URLs)
        sa.Column("text", sa.Text, nullable=False),
        sa.Column("editedText", sa.Text, nullable=False),
        sa.Column("place", sa.String(255), nullable=True),
        sa.Column("userPlace", sa.String(255), nullable=True),
        sa.Column("source", sa.String(255), nullable=False),
        sa.Column("geolocation", sa.String(255), nullable=True),
        sa.Column("lang", sa.String(255), nullable=True),
        sa.Column("favoriteCount", sa.Integer, nullable=False),
        sa.Column("retweetCount", sa.Integer, nullable=False),
        sa.Column("hashtags", sa.String(255), nullable=False),
    )
