"""Clients for remote collaborators."""

from .partner_sync_client import PartnerSyncClient

__all__ = ['PartnerSyncClient']
