"""Issue map back end for Raipur Smart Connect."""
