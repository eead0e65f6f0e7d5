"""Body-weight progression analyses."""
