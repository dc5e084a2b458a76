"""tabtree command line interface."""
