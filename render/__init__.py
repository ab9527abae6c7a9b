"""Terminal output: backend, ranked view and the polling display loop."""
