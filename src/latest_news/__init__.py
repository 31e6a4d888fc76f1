"""Latest items from your favorite sites, fetched in parallel."""
