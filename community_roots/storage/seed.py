"""Bootstrap lineage used when no saved data exists."""

from community_roots.models import Gender, Person


def initial_people() -> list[Person]:
    """Fresh copy of the sample Sharma family."""
    return [
        Person(
            id="1",
            first_name="Rajesh",
            last_name="Sharma",
            gender=Gender.MALE,
            dob="1955-06-15",
            current_location="New Delhi, India",
            place_of_birth="Varanasi, UP",
            ancestral_home="Varanasi, UP",
            profession="Civil Engineer (Retd.)",
            bio="Avid traveler and history enthusiast. Loves discussing family roots.",
        ),
        Person(
            id="2",
            first_name="Sunita",
            last_name="Sharma",
            gender=Gender.FEMALE,
            dob="1960-03-20",
            current_location="New Delhi, India",
            place_of_birth="Lucknow, UP",
            ancestral_home="Lucknow, UP",
            profession="Educationist",
            spouse_id="1",
        ),
        Person(
            id="3",
            first_name="Amit",
            last_name="Sharma",
            gender=Gender.MALE,
            dob="1985-11-10",
            current_location="Bangalore, KA",
            place_of_birth="New Delhi, India",
            ancestral_home="Varanasi, UP",
            profession="Software Architect",
            bio="Passionate about building technologies that bring people together.",
            father_id="1",
            mother_id="2",
        ),
        Person(
            id="4",
            first_name="Deepak",
            last_name="Sharma",
            gender=Gender.MALE,
            dob="1962-01-05",
            current_location="Lucknow, UP",
            place_of_birth="Lucknow, UP",
            ancestral_home="Varanasi, UP",
            profession="Business Owner",
            father_id="10",
        ),
        Person(
            id="10",
            first_name="Harish",
            last_name="Sharma",
            gender=Gender.MALE,
            dob="1930-05-12",
            current_location="Haridwar, UK",
            place_of_birth="Rawalpindi",
            ancestral_home="Rawalpindi (Pre-partition)",
            profession="Community Leader",
            is_living=False,
        ),
    ]
