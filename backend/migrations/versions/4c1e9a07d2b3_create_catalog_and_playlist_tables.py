"""Create catalog and playlist tables

Revision ID: 4c1e9a07d2b3
Revises:
Create Date: 2026-10-17

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4c1e9a07d2b3"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create artists, songs, users, playlists and playlist_songs."""
    op.create_table(
        "artists",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        *_timestamps(),
        sa.CheckConstraint("length(name) > 0", name="ck_artists_name_not_empty"),
    )
    op.create_index("ix_artists_name", "artists", ["name"])

    op.create_table(
        "songs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "artist_id", sa.Integer(), sa.ForeignKey("artists.id"), nullable=False
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("duration", sa.String(10), nullable=True),
        sa.Column("genre", sa.String(100), nullable=True),
        sa.Column("release_year", sa.Integer(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_songs_artist_id", "songs", ["artist_id"])
    op.create_index("ix_songs_title", "songs", ["title"])

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "playlists",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), server_default="", nullable=False),
        sa.Column(
            "color_hex", sa.String(7), server_default="#a855f7", nullable=False
        ),
        *_timestamps(),
        sa.CheckConstraint("length(name) > 0", name="ck_playlists_name_not_empty"),
    )
    op.create_index("ix_playlists_user_id", "playlists", ["user_id"])

    op.create_table(
        "playlist_songs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "playlist_id",
            sa.Integer(),
            sa.ForeignKey("playlists.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("song_id", sa.Integer(), sa.ForeignKey("songs.id"), nullable=False),
        sa.Column("track_order", sa.Integer(), nullable=False),
        sa.Column("added_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        "ix_playlist_songs_playlist_order",
        "playlist_songs",
        ["playlist_id", "track_order"],
    )
    op.create_index("ix_playlist_songs_song_id", "playlist_songs", ["song_id"])


def downgrade() -> None:
    """Drop every table created by upgrade."""
    op.drop_table("playlist_songs")
    op.drop_table("playlists")
    op.drop_table("users")
    op.drop_table("songs")
    op.drop_table("artists")
