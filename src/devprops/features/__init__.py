"""Feature packages for devprops."""
