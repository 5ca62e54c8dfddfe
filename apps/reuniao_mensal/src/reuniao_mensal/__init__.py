"""Monthly recurring event date picker."""
