"""Console front-end for the bigint calculator."""
