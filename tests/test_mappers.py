from tools.mappers import (
    FTE_FIELD,
    FUNDING_AMOUNT_FIELD,
    FUNDING_DATE_FIELD,
    FUNDING_TYPE_FIELD,
    field_update,
    format_funding_type,
    fte_update,
    funding_update,
    locations_update,
)


class TestFieldMappers:
    """Test the Close update payload builders."""

    def setup_method(self):
        self.locations = [
            {"line1": "1 Main St", "city": "Paris", "country": "FR"},
            {
                "line1": "500 Market St",
                "line2": "Floor 3",
                "city": "San Francisco",
                "geographicArea": "CA",
                "postalCode": "94105",
                "country": "US"
            }
        ]

    def test_fte_update(self):
        assert fte_update(50) == {FTE_FIELD: 50}

    def test_locations_defaults_optional_parts(self):
        result = locations_update(self.locations)

        assert result["addresses"][0] == {
            "address_1": "1 Main St",
            "address_2": "",
            "city": "Paris",
            "state": "",
            "zipcode": "",
            "country": "FR"
        }
        assert result["addresses"][1]["address_2"] == "Floor 3"
        assert result["addresses"][1]["state"] == "CA"
        assert result["addresses"][1]["zipcode"] == "94105"

    def test_locations_update_is_idempotent(self):
        assert locations_update(self.locations) == locations_update(self.locations)
        assert self.locations[0] == {"line1": "1 Main St", "city": "Paris", "country": "FR"}

    def test_funding_type_labels(self):
        assert format_funding_type("seed") == "Seed"
        assert format_funding_type("series_unknown") == "Venture - Series Unknown"
        assert format_funding_type("SERIES_A") == "Series a"

    def test_funding_update(self):
        result = funding_update({
            "moneyRaised": {"amount": "2500000", "currencyCode": "USD"},
            "announcedOn": {"day": 4, "month": 7, "year": 2019},
            "fundingType": "SERIES_UNKNOWN"
        })

        assert result == {
            FUNDING_AMOUNT_FIELD: "2500000",
            FUNDING_DATE_FIELD: "7/4/2019",
            FUNDING_TYPE_FIELD: "Venture - Series Unknown"
        }

    def test_funding_update_without_amount(self):
        result = funding_update({
            "announcedOn": {"day": 1, "month": 12, "year": 2020},
            "fundingType": "seed"
        })

        assert result[FUNDING_AMOUNT_FIELD] == "Not Found"
        assert result[FUNDING_DATE_FIELD] == "12/1/2020"
        assert result[FUNDING_TYPE_FIELD] == "Seed"

    def test_field_update(self):
        assert field_update("url", "https://acme.example") == {"url": "https://acme.example"}
