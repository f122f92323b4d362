"""contentsync - mirror an authoring directory into a static site's content tree."""
