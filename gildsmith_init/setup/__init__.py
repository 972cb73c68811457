"""Setup layer: console output, translations, manifests and step orchestration."""
