"""
Sample establishment records served until a real data source exists.

Records are raw mappings, shaped like rows from an external feed, and are
decoded through the domain factories when the repository is built.
"""

SAMPLE_ESTABLISHMENTS: tuple[dict, ...] = (
    {
        "urn": 100000,
        "name": "Sir John Cass's Foundation Primary School",
        "website_url": "http://www.sirjohncassprimary.org",
        "telephone_number": "02072831147",
    },
    {
        "urn": 100001,
        "name": "City of London School for Girls",
        "website_url": "http://www.clsg.org.uk",
        "telephone_number": "02078475500",
    },
    {
        "urn": 136284,
        "name": "Harris Academy Peckham",
        "website_url": "http://www.harrispeckham.org.uk",
        "telephone_number": "+44 7700900123",
    },
)
