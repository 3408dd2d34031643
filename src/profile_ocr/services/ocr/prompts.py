PROFILE_EXTRACTION_PROMPT = """Extract from this social media profile screenshot and return as JSON:
{
  "username": "@handle",
  "displayName": "Full Name",
  "platform": "Instagram/TikTok/YouTube",
  "followers": "1.2M",
  "bio": "bio text",
  "bioLinks": ["url1", "url2"],
  "extractedLinks": [
    {"url": "link", "type": "social|monetization|business|contact", "title": "Link Title"}
  ]
}
Return only the JSON object. Use an empty string or an empty list for anything not visible in the screenshot."""
