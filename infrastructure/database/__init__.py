"""In-memory persistence for devices and the energy plan."""
