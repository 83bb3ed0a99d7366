"""HTTP boundary for the Nibert Investments site API."""
