"""MTS blog server: blog documents and user accounts over MongoDB."""
