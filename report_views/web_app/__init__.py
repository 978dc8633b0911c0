"""Web application package for Report Views."""
