"""
Static lawyer catalog loaded into an empty store at startup
"""

SEED_LAWYERS = [
    {
        "name": "Sarah Johnson",
        "profileImage": "https://randomuser.me/api/portraits/women/44.jpg",
        "bio": "Compassionate family law attorney with 15 years of experience in divorce, custody and adoption cases.",
        "practiceAreas": ["family_law", "estate_planning"],
        "hourlyRate": 250,
        "rating": 4.9,
        "reviewCount": 127,
        "location": "Chicago, IL",
        "experienceLevel": "senior",
        "availableForConsultation": True,
        "featured": True,
        "contactEmail": "sarah.johnson@lawyermatch.com",
        "contactPhone": "(312) 555-0142",
        "address": "200 W Madison St, Chicago, IL 60606",
    },
    {
        "name": "Michael Chen",
        "profileImage": "https://randomuser.me/api/portraits/men/32.jpg",
        "bio": "Former prosecutor defending clients against felony and misdemeanor charges.",
        "practiceAreas": ["criminal_defense"],
        "hourlyRate": 300,
        "rating": 4.7,
        "reviewCount": 89,
        "location": "Los Angeles, CA",
        "experienceLevel": "senior",
        "availableForConsultation": True,
        "featured": True,
        "contactEmail": "michael.chen@lawyermatch.com",
        "contactPhone": "(213) 555-0187",
        "address": "350 S Grand Ave, Los Angeles, CA 90071",
    },
    {
        "name": "Maria Rodriguez",
        "profileImage": "https://randomuser.me/api/portraits/women/68.jpg",
        "bio": "Bilingual immigration attorney helping families with visas, green cards and naturalization.",
        "practiceAreas": ["immigration_law", "family_law"],
        "hourlyRate": 175,
        "rating": 4.8,
        "reviewCount": 156,
        "location": "Miami, FL",
        "experienceLevel": "mid",
        "availableForConsultation": True,
        "featured": False,
        "contactEmail": "maria.rodriguez@lawyermatch.com",
        "contactPhone": "(305) 555-0123",
        "address": "100 SE 2nd St, Miami, FL 33131",
    },
    {
        "name": "David Williams",
        "profileImage": "https://randomuser.me/api/portraits/men/75.jpg",
        "bio": "Personal injury litigator who has recovered millions for accident victims.",
        "practiceAreas": ["personal_injury"],
        "hourlyRate": 200,
        "rating": 4.6,
        "reviewCount": 203,
        "location": "Houston, TX",
        "experienceLevel": "senior",
        "availableForConsultation": False,
        "featured": False,
        "contactEmail": "david.williams@lawyermatch.com",
        "contactPhone": "(713) 555-0166",
        "address": "811 Main St, Houston, TX 77002",
    },
    {
        "name": "Emily Thompson",
        "profileImage": "https://randomuser.me/api/portraits/women/12.jpg",
        "bio": "Estate planning and tax attorney drafting wills, trusts and succession plans.",
        "practiceAreas": ["estate_planning", "tax_law"],
        "hourlyRate": 225,
        "rating": 4.5,
        "reviewCount": 64,
        "location": "Boston, MA",
        "experienceLevel": "mid",
        "availableForConsultation": True,
        "featured": False,
        "contactEmail": "emily.thompson@lawyermatch.com",
        "contactPhone": "(617) 555-0109",
        "address": "1 Federal St, Boston, MA 02110",
    },
    {
        "name": "James Patel",
        "profileImage": "https://randomuser.me/api/portraits/men/45.jpg",
        "bio": "Employment lawyer representing workers in wrongful termination and wage disputes.",
        "practiceAreas": ["employment_law"],
        "hourlyRate": 150,
        "rating": 4.2,
        "reviewCount": 38,
        "location": "Seattle, WA",
        "experienceLevel": "junior",
        "availableForConsultation": True,
        "featured": False,
        "contactEmail": "james.patel@lawyermatch.com",
        "contactPhone": "(206) 555-0134",
        "address": "1201 3rd Ave, Seattle, WA 98101",
    },
    {
        "name": "Olivia Martinez",
        "profileImage": "https://randomuser.me/api/portraits/women/29.jpg",
        "bio": "Business attorney advising startups on formation, contracts and financing.",
        "practiceAreas": ["business_law", "intellectual_property"],
        "hourlyRate": 350,
        "rating": 4.9,
        "reviewCount": 91,
        "location": "San Francisco, CA",
        "experienceLevel": "senior",
        "availableForConsultation": True,
        "featured": True,
        "contactEmail": "olivia.martinez@lawyermatch.com",
        "contactPhone": "(415) 555-0171",
        "address": "101 California St, San Francisco, CA 94111",
    },
    {
        "name": "Robert Kim",
        "profileImage": "https://randomuser.me/api/portraits/men/52.jpg",
        "bio": "Patent and trademark counsel for software and hardware companies.",
        "practiceAreas": ["intellectual_property"],
        "hourlyRate": 400,
        "rating": 4.4,
        "reviewCount": 47,
        "location": "Austin, TX",
        "experienceLevel": "mid",
        "availableForConsultation": False,
        "featured": False,
        "contactEmail": "robert.kim@lawyermatch.com",
        "contactPhone": "(512) 555-0158",
        "address": "500 W 2nd St, Austin, TX 78701",
    },
    {
        "name": "Jennifer Davis",
        "profileImage": "https://randomuser.me/api/portraits/women/56.jpg",
        "bio": "Real estate attorney handling residential closings, leases and title disputes.",
        "practiceAreas": ["real_estate_law", "business_law"],
        "hourlyRate": 190,
        "rating": 4.3,
        "reviewCount": 72,
        "location": "Denver, CO",
        "experienceLevel": "mid",
        "availableForConsultation": True,
        "featured": False,
        "contactEmail": "jennifer.davis@lawyermatch.com",
        "contactPhone": "(303) 555-0147",
        "address": "1700 Lincoln St, Denver, CO 80203",
    },
    {
        "name": "Thomas Brown",
        "profileImage": "https://randomuser.me/api/portraits/men/18.jpg",
        "bio": "Criminal defense attorney focused on DUI, drug offenses and expungements.",
        "practiceAreas": ["criminal_defense", "personal_injury"],
        "hourlyRate": 125,
        "rating": 3.8,
        "reviewCount": 25,
        "location": "Phoenix, AZ",
        "experienceLevel": "junior",
        "availableForConsultation": True,
        "featured": False,
        "contactEmail": "thomas.brown@lawyermatch.com",
        "contactPhone": "(602) 555-0112",
        "address": "2 N Central Ave, Phoenix, AZ 85004",
    },
    {
        "name": "Aisha Okafor",
        "profileImage": "https://randomuser.me/api/portraits/women/81.jpg",
        "bio": "Immigration and employment attorney assisting skilled workers with work visas.",
        "practiceAreas": ["immigration_law", "employment_law"],
        "hourlyRate": 160,
        "rating": 4.6,
        "reviewCount": 58,
        "location": "New York, NY",
        "experienceLevel": "mid",
        "availableForConsultation": True,
        "featured": True,
        "contactEmail": "aisha.okafor@lawyermatch.com",
        "contactPhone": "(212) 555-0193",
        "address": "1 Liberty Plaza, New York, NY 10006",
    },
    {
        "name": "Daniel Garcia",
        "profileImage": "https://randomuser.me/api/portraits/men/64.jpg",
        "bio": "Tax attorney resolving IRS audits, liens and small business tax planning.",
        "practiceAreas": ["tax_law", "business_law"],
        "hourlyRate": 275,
        "rating": 3.5,
        "reviewCount": 19,
        "location": "Atlanta, GA",
        "experienceLevel": "junior",
        "availableForConsultation": False,
        "featured": False,
        "contactEmail": "daniel.garcia@lawyermatch.com",
        "contactPhone": "(404) 555-0138",
        "address": "191 Peachtree St NE, Atlanta, GA 30303",
    },
]
