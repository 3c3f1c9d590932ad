"""Export layout results to JSON and pandas."""
