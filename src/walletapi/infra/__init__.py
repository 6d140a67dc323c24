"""Infrastructure adapters: database wiring and SQLModel repositories."""
