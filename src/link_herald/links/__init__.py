"""Link extraction, dedup, scraping and summarization."""
