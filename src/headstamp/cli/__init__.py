"""Click-based command line interface for Headstamp."""
