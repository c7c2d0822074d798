"""Journal aggregation reports."""
