"""Request dependencies shared by the route modules."""
