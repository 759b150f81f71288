"""Host adapters that drive the editing core from a UI toolkit."""
