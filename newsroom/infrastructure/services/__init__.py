"""Infrastructure services: background jobs and startup seeding."""

from newsroom.infrastructure.services.nav_menu_seed import seed_nav_menu
from newsroom.infrastructure.services.post_view_retention import (
    purge_expired_views,
    run_purge_loop,
)

__all__ = ["purge_expired_views", "run_purge_loop", "seed_nav_menu"]
