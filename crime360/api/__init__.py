"""HTTP surface for the Crime 360 dashboards."""
