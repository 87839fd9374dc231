"""Tests for JSON-LD serialization and merging."""

import json
from decimal import Decimal

import pytest

from seo_json_ld import faq_ld, json_ld_script, merge_schemas, organization_ld
from seo_json_ld.errors import SerializationError


class TestJsonLdScript:
    def test_single_schema(self):
        schema = {"@context": "https://schema.org", "@type": "Organization", "name": "Test Org"}
        out = json_ld_script(schema)
        assert out == '{"@context":"https://schema.org","@type":"Organization","name":"Test Org"}'

    def test_list_of_schemas(self):
        schemas = [
            {"@context": "https://schema.org", "@type": "Organization", "name": "Test Org"},
            {"@context": "https://schema.org", "@type": "WebPage", "name": "Test Page"},
        ]
        out = json_ld_script(schemas)
        assert out.startswith("[")
        assert json.loads(out) == schemas

    def test_tuple_serialized_as_array(self):
        schema = {"@context": "https://schema.org", "@type": "Thing"}
        assert json.loads(json_ld_script((schema,))) == [schema]

    def test_key_order_preserved(self):
        schema = {"@context": "https://schema.org", "@type": "Thing", "z": 1, "a": 2}
        assert json_ld_script(schema).index('"z"') < json_ld_script(schema).index('"a"')

    def test_nested_round_trip(self):
        schema = {
            "@context": "https://schema.org",
            "@type": "Product",
            "offers": {
                "@type": "Offer",
                "priceSpecification": {
                    "@type": "PriceSpecification",
                    "price": 99.99,
                    "minPrice": 49.99,
                    "maxPrice": 149.99,
                },
            },
        }
        out = json_ld_script(schema)
        assert "99.99" in out
        assert json.loads(out) == schema

    def test_special_characters(self):
        schema = {
            "@context": "https://schema.org",
            "@type": "Organization",
            "name": 'Test & Sons "Company" <test@example.com>',
            "description": "Special chars: éàüö 中文日本語",
        }
        out = json_ld_script(schema)
        assert "Test & Sons" in out
        assert "中文日本語" in out
        assert json.loads(out) == schema

    def test_unicode_emoji(self):
        schema = {
            "@context": "https://schema.org",
            "@type": "Event",
            "name": "🎉 New Year's Eve Party 🎊",
            "description": "Celebrate! 🚀",
        }
        out = json_ld_script(schema)
        assert "🎉" in out and "🎊" in out and "🚀" in out
        assert json.loads(out) == schema

    def test_builder_output_round_trip(self, full_organization):
        schema = organization_ld(
            full_organization,
            area_served={"geoMidpoint": {"latitude": 52.37, "longitude": 4.9}, "geoRadius": "30km"},
            opening_hours={"open24Hours": True},
        )
        assert json.loads(json_ld_script(schema)) == schema

    def test_unserializable_value(self):
        with pytest.raises(SerializationError) as exc:
            json_ld_script({"@context": "https://schema.org", "@type": "Thing", "price": Decimal("1.50")})
        assert exc.value.code == "LD_500"

    def test_nan_rejected(self):
        with pytest.raises(SerializationError):
            json_ld_script({"@context": "https://schema.org", "@type": "Thing", "value": float("nan")})


class TestMergeSchemas:
    def test_merge(self, organization):
        org = organization_ld(organization)
        faq = faq_ld([{"question": "Q1?", "answer": "A1"}])
        merged = merge_schemas([org, faq])
        assert len(merged) == 2
        assert merged[0]["@type"] == "LocalBusiness"
        assert merged[1]["@type"] == "FAQPage"

    def test_empty(self):
        assert merge_schemas([]) == []

    def test_order_preserved(self):
        a, b, c = ({"@context": "https://schema.org", "@type": t} for t in ("A", "B", "C"))
        assert merge_schemas([a, b, c]) == [a, b, c]

    def test_many(self):
        schemas = [organization_ld({"name": f"Org {i}", "url": f"https://org{i}.com"}) for i in range(10)]
        assert len(merge_schemas(schemas)) == 10
