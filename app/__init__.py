"""Console front-ends for the pattern demos."""
