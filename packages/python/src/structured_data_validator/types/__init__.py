"""Per-type rule-sets and the default registry.

``DEFAULT_HANDLERS`` maps a schema.org type name to the rule-set
factories run for it, in order.  Types without an entry fall back to
their nearest registered ancestor when a vocabulary is configured.
"""

from __future__ import annotations

from structured_data_validator.base import RuleSetFactory
from structured_data_validator.types.article import ArticleRuleSet
from structured_data_validator.types.breadcrumb_list import BreadcrumbListRuleSet
from structured_data_validator.types.defined_region import DefinedRegionRuleSet
from structured_data_validator.types.event import EventRuleSet
from structured_data_validator.types.list_item import ListItemRuleSet
from structured_data_validator.types.local_business import LocalBusinessRuleSet
from structured_data_validator.types.merchant_return_policy import MerchantReturnPolicyRuleSet
from structured_data_validator.types.offer import AggregateOfferRuleSet, OfferRuleSet
from structured_data_validator.types.pages import FAQPageRuleSet, QAPageRuleSet, WebSiteRuleSet
from structured_data_validator.types.product import ProductRuleSet
from structured_data_validator.types.product_merchant import ProductMerchantRuleSet
from structured_data_validator.types.rating import AggregateRatingRuleSet, RatingRuleSet
from structured_data_validator.types.schema_org import SchemaOrgRuleSet


DEFAULT_HANDLERS: dict[str, list[RuleSetFactory]] = {
    "AggregateOffer": [AggregateOfferRuleSet],
    "AggregateRating": [AggregateRatingRuleSet],
    "Article": [ArticleRuleSet],
    "BlogPosting": [ArticleRuleSet],
    "BreadcrumbList": [BreadcrumbListRuleSet],
    "DefinedRegion": [DefinedRegionRuleSet],
    "Event": [EventRuleSet],
    "FAQPage": [FAQPageRuleSet],
    "ListItem": [ListItemRuleSet],
    "LocalBusiness": [LocalBusinessRuleSet],
    "MerchantReturnPolicy": [MerchantReturnPolicyRuleSet],
    "NewsArticle": [ArticleRuleSet],
    "Offer": [OfferRuleSet],
    "Product": [ProductRuleSet, ProductMerchantRuleSet],
    "QAPage": [QAPageRuleSet],
    "Rating": [RatingRuleSet],
    "WebSite": [WebSiteRuleSet],
}

__all__ = [
    "DEFAULT_HANDLERS",
    "AggregateOfferRuleSet",
    "AggregateRatingRuleSet",
    "ArticleRuleSet",
    "BreadcrumbListRuleSet",
    "DefinedRegionRuleSet",
    "EventRuleSet",
    "FAQPageRuleSet",
    "ListItemRuleSet",
    "LocalBusinessRuleSet",
    "MerchantReturnPolicyRuleSet",
    "OfferRuleSet",
    "ProductMerchantRuleSet",
    "ProductRuleSet",
    "QAPageRuleSet",
    "RatingRuleSet",
    "SchemaOrgRuleSet",
    "WebSiteRuleSet",
]
