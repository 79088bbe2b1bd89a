"""Storefront services: models, money, listing, catalog client, repositories, domains."""
