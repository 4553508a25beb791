"""Testing helpers – in-memory doubles for svclog collaborators."""
