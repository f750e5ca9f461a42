"""siteops: administrative backend for the construction site-tracking app."""
