"""TailorBook command-line interface."""
