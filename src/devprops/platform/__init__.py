"""Platform services (logging) shared by devprops features."""
