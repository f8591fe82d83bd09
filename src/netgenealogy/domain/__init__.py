"""Pure domain layer: model, resolution processes and ports."""
