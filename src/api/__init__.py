"""HTTP API exposing the submission stats view state."""
