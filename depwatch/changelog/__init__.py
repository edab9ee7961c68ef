"""Changelog entries, versions, sources and the stages that filter, enrich and rank them."""