"""Sample profiles for demonstrating the dashboard without a vision model."""
from datetime import datetime, timezone
from typing import List

from ..models import LinkCategory, LinkRecord, ProfileRecord, ProfileStatus


def demo_profiles() -> List[ProfileRecord]:
    now = datetime.now(timezone.utc)
    return [
        ProfileRecord(
            id="1",
            source_file_name="instagram_profile_1.png",
            username="@rubirose",
            display_name="Rubi Rose",
            platform="Instagram",
            follower_count_text="2.1M",
            bio="Artist • Entrepreneur • OnlyFans Link Below",
            bio_links=["https://onlyfans.com/rubirose", "https://linktr.ee/rubirose"],
            extracted_links=[
                LinkRecord(url="https://onlyfans.com/rubirose", category=LinkCategory.MONETIZATION, title="OnlyFans"),
                LinkRecord(url="https://linktr.ee/rubirose", category=LinkCategory.BUSINESS, title="All Links"),
                LinkRecord(url="https://instagram.com/rubirose", category=LinkCategory.SOCIAL, title="Instagram"),
            ],
            generated_page_url="https://tdstudios.app/rubirose",
            revenue_estimate=15640,
            status=ProfileStatus.COMPLETED,
            processed_at=now,
        ),
        ProfileRecord(
            id="2",
            source_file_name="tiktok_profile_2.png",
            username="@bellapoarch",
            display_name="Bella Poarch",
            platform="TikTok",
            follower_count_text="89.2M",
            bio="Singer • Content Creator • Links in bio ⬇️",
            bio_links=["https://bellapoarch.com", "https://fanlink.to/bellapoarch"],
            extracted_links=[
                LinkRecord(url="https://bellapoarch.com", category=LinkCategory.BUSINESS, title="Official Website"),
                LinkRecord(url="https://fanlink.to/bellapoarch", category=LinkCategory.BUSINESS, title="Music Links"),
                LinkRecord(url="https://tiktok.com/@bellapoarch", category=LinkCategory.SOCIAL, title="TikTok"),
            ],
            generated_page_url="https://tdstudios.app/bellapoarch",
            revenue_estimate=23890,
            status=ProfileStatus.PROCESSING,
            processed_at=now,
        ),
    ]
