import pytest

from lawyermatch.services.lawyer_store import LawyerStore


def make_lawyer_data(**overrides):
    """Valid creation payload; keyword arguments override single fields"""
    data = {
        "name": "Jane Doe",
        "profile_image": "https://example.com/jane.jpg",
        "bio": "General practice attorney.",
        "practice_areas": ["family_law"],
        "hourly_rate": 150,
        "rating": 4.0,
        "review_count": 10,
        "location": "Portland, OR",
        "experience_level": "mid",
        "available_for_consultation": True,
        "featured": False,
        "contact_email": "jane@example.com",
        "contact_phone": "(503) 555-0100",
        "address": "1 Main St, Portland, OR 97204",
    }
    data.update(overrides)
    return data


@pytest.fixture
def store():
    return LawyerStore()


@pytest.fixture
def lawyer_data():
    return make_lawyer_data
