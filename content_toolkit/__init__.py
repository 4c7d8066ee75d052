"""Recipe SEO content toolkit."""
