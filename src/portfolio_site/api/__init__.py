"""HTTP API for the portfolio site."""
