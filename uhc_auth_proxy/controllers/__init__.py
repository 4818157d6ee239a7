"""Request controllers for the auth proxy."""
