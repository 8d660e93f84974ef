"""CardFile: text materials catalogue with editorial approval workflow."""
