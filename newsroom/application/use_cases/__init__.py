"""Application use cases: content management (categories, posts, tags, ads, ...)."""
