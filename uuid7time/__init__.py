"""Extract the embedded timestamp from version-7 UUIDs."""
