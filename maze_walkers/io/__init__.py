"""Output schemas and path conventions for generation artifacts."""
