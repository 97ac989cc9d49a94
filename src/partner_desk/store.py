"""
In-memory partner store.

The store is the single writer for partners, interactions, threads,
contacts and health history. It:
- Coerces borderline creation input instead of rejecting it
- Assigns identities and creation timestamps
- Keeps partner derived fields (last_activity, open_threads) consistent
- Reconciles remote partner change events into the partner collection

Collections are ordered most-recent-first. Every operation runs to
completion before returning; nothing here raises for a missing partner
reference.
"""

from collections.abc import Callable, Iterable
from datetime import datetime

from .config import Config, config
from .errors import PartialSuccessResult, ReconciliationError
from .logging import get_logger
from .models.activity import Interaction, InteractionKind, Thread, ThreadStatus
from .models.events import PartnerChangeEvent, PartnerChangeKind
from .models.inputs import (
    ContactCreateInput,
    HealthUpdate,
    InteractionCreateInput,
    PartnerCreateInput,
    ThreadCreateInput,
)
from .models.partner import Contact, HealthHistoryEntry, Partner, PartnerHealth
from .utils import as_local, coerce_revenue, make_id, text_or_default

logger = get_logger(__name__)

Clock = Callable[[], datetime]


class PartnerStore:
    """
    Owner of the partner desk collections and their only mutation path.

    Construct one per owner (HTTP app, test, script) and pass it to whatever
    needs it; there is no module-level instance.
    """

    def __init__(
        self,
        partners: Iterable[Partner] | None = None,
        interactions: Iterable[Interaction] | None = None,
        threads: Iterable[Thread] | None = None,
        contacts: Iterable[Contact] | None = None,
        health_history: Iterable[HealthHistoryEntry] | None = None,
        clock: Clock | None = None,
        settings: Config | None = None,
    ):
        """
        Initialize the store, copying any seed collections.

        Args:
            partners: Seed partners, most recent first
            interactions: Seed interactions, most recent first
            threads: Seed threads, most recent first
            contacts: Seed contacts
            health_history: Seed health history entries, newest first
            clock: Source of "now" (defaults to local wall clock)
            settings: Configuration (defaults to the environment config)
        """
        self._partners: list[Partner] = [self._localize(p) for p in partners or []]
        self._interactions: list[Interaction] = [i.model_copy() for i in interactions or []]
        self._threads: list[Thread] = [t.model_copy() for t in threads or []]
        self._contacts: list[Contact] = [c.model_copy() for c in contacts or []]
        self._health_history: list[HealthHistoryEntry] = [
            h.model_copy() for h in health_history or []
        ]
        self._clock: Clock = clock or datetime.now
        self.settings = settings or config

    # =========================================================================
    # Reads
    # =========================================================================

    @property
    def partners(self) -> tuple[Partner, ...]:
        return tuple(self._partners)

    @property
    def interactions(self) -> tuple[Interaction, ...]:
        return tuple(self._interactions)

    @property
    def threads(self) -> tuple[Thread, ...]:
        return tuple(self._threads)

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return tuple(self._contacts)

    def now(self) -> datetime:
        """Current time according to the store's clock."""
        return as_local(self._clock())

    def get_partner(self, partner_id: str) -> Partner | None:
        """Look up a partner by id."""
        index = self._partner_index(partner_id)
        return self._partners[index] if index is not None else None

    def health_history(self, partner_id: str) -> list[HealthHistoryEntry]:
        """Health history for one partner, newest first."""
        return [h for h in self._health_history if h.partner_id == partner_id]

    def contacts_for(self, partner_id: str) -> list[Contact]:
        """Contacts for one partner, in insertion order (most recent first)."""
        return [c for c in self._contacts if c.partner_id == partner_id]

    # =========================================================================
    # Partner Operations
    # =========================================================================

    def add_partner(self, data: PartnerCreateInput) -> Partner:
        """
        Create a partner and put it at the front of the collection.

        Blank segment/account manager fall back to configured defaults and a
        non-finite or negative revenue becomes 0. Always succeeds.

        Args:
            data: Caller-supplied partner fields

        Returns:
            The created Partner
        """
        now = self.now()
        partner = Partner(
            id=make_id('partner'),
            name=(data.name or '').strip(),
            tier=data.tier,
            health=data.health,
            last_activity=now,
            open_threads=0,
            revenue=coerce_revenue(data.revenue),
            segment=text_or_default(data.segment, self.settings.DEFAULT_SEGMENT),
            account_manager=text_or_default(
                data.account_manager, self.settings.DEFAULT_ACCOUNT_MANAGER
            ),
        )
        self._partners.insert(0, partner)
        self._record_health(partner.id, partner.health, 'Partner created', now)

        logger.info(
            'store.partner_added',
            partner_id=partner.id,
            tier=partner.tier.value,
            health=partner.health.value,
        )
        return partner

    def update_partner_health(
        self,
        partner_id: str,
        health: PartnerHealth,
        reason: str | None = None,
    ) -> Partner | None:
        """
        Replace a partner's health classification.

        A history entry is recorded only when the value actually changes.

        Args:
            partner_id: Partner to reclassify
            health: New health value
            reason: Optional explanation kept with the history entry

        Returns:
            The updated Partner, or None when the partner or the health
            value is unknown (no-op)
        """
        index = self._partner_index(partner_id)
        if index is None:
            logger.warning('store.health_update_unknown_partner', partner_id=partner_id)
            return None

        try:
            health = PartnerHealth(health)
        except ValueError:
            logger.warning('store.health_update_unknown_value', partner_id=partner_id, health=health)
            return None

        current = self._partners[index]
        if current.health == health:
            return current

        updated = current.model_copy(update={'health': health})
        self._partners[index] = updated
        self._record_health_change(
            current,
            health,
            (reason or '').strip() or f'Health changed to {health.value}',
            self.now(),
        )

        logger.info(
            'store.partner_health_updated',
            partner_id=partner_id,
            previous=current.health.value,
            health=health.value,
        )
        return updated

    def apply_health_update(self, update: HealthUpdate) -> Partner | None:
        """Apply a HealthUpdate input; see update_partner_health."""
        return self.update_partner_health(update.partner_id, update.health, update.reason)

    def add_contact(self, data: ContactCreateInput) -> Contact:
        """
        Add a contact for a partner.

        A new primary contact demotes the partner's previous primary. Unknown
        partner ids are accepted, matching the other create operations.
        """
        now = self.now()
        if data.is_primary:
            self._contacts = [
                c.model_copy(update={'is_primary': False, 'updated_at': now})
                if c.partner_id == data.partner_id and c.is_primary
                else c
                for c in self._contacts
            ]

        contact = Contact(
            id=make_id('contact'),
            partner_id=data.partner_id,
            first_name=data.first_name.strip(),
            last_name=data.last_name.strip(),
            email=(data.email or '').strip() or None,
            phone=(data.phone or '').strip() or None,
            role=data.role,
            is_primary=data.is_primary,
            notes=data.notes,
            created_at=now,
            updated_at=now,
        )
        self._contacts.insert(0, contact)

        logger.info(
            'store.contact_added',
            partner_id=data.partner_id,
            contact_id=contact.id,
            is_primary=contact.is_primary,
        )
        return contact

    # =========================================================================
    # Interaction Operations
    # =========================================================================

    def log_interaction(self, data: InteractionCreateInput) -> Interaction:
        """
        Log an interaction and bump the partner's last activity.

        The interaction type (direct/indirect) is derived from the channel.
        An unknown partner id still produces a record, named with the
        configured sentinel.

        Args:
            data: Caller-supplied interaction fields

        Returns:
            The created Interaction
        """
        now = self.now()
        partner = self.get_partner(data.partner_id)

        interaction = Interaction(
            id=make_id('interaction'),
            partner_id=data.partner_id,
            partner_name=self._partner_name(partner),
            type=InteractionKind.for_channel(data.channel),
            channel=data.channel,
            interaction_type=data.interaction_type,
            summary=(data.summary or '').strip(),
            date=now,
            resolved=False,
            follow_up_required=data.follow_up_required,
            follow_up_date=as_local(data.follow_up_date),
            owner=data.owner,
        )
        self._interactions.insert(0, interaction)
        self._touch_partner(data.partner_id, now)

        logger.info(
            'store.interaction_logged',
            interaction_id=interaction.id,
            partner_id=data.partner_id,
            partner_found=partner is not None,
            channel=interaction.channel.value,
            kind=interaction.type.value,
        )
        return interaction

    # =========================================================================
    # Thread Operations
    # =========================================================================

    def add_thread(self, data: ThreadCreateInput) -> Thread:
        """
        Open a thread and update the partner's derived fields.

        The partner's open-thread counter goes up by one unless the thread
        is created already resolved.

        Args:
            data: Caller-supplied thread fields

        Returns:
            The created Thread
        """
        now = self.now()
        partner = self.get_partner(data.partner_id)

        thread = Thread(
            id=make_id('thread'),
            partner_id=data.partner_id,
            partner_name=self._partner_name(partner),
            title=(data.title or '').strip(),
            status=data.status,
            owner=data.owner,
            visibility=data.visibility,
            priority=data.priority,
            created_at=now,
            updated_at=now,
            interaction_count=0,
            last_activity=text_or_default(
                data.last_activity, self.settings.DEFAULT_THREAD_ACTIVITY
            ),
        )
        self._threads.insert(0, thread)

        increment = 0 if thread.status == ThreadStatus.RESOLVED else 1
        self._touch_partner(data.partner_id, now, open_threads_delta=increment)

        logger.info(
            'store.thread_added',
            thread_id=thread.id,
            partner_id=data.partner_id,
            partner_found=partner is not None,
            status=thread.status.value,
            open_threads_delta=increment,
        )
        return thread

    # =========================================================================
    # Remote Reconciliation
    # =========================================================================

    def apply_remote_change(self, event: PartnerChangeEvent) -> Partner | None:
        """
        Reconcile one remote change into the partner collection.

        Last writer wins: inserts and updates replace any record with the
        same id in place, or splice it in at the front. A remote health
        change on a known partner is appended to its health history;
        interactions, threads and contacts are never touched.

        Args:
            event: Remote change event

        Returns:
            The inserted/updated Partner, the removed Partner for deletes,
            or None (replace, or delete of an unknown id)

        Raises:
            ReconciliationError: The event lacks the payload its kind needs
        """
        kind = PartnerChangeKind(event.kind)
        log = logger.bind(change_kind=kind.value, partner_id=event.target_id)

        if kind == PartnerChangeKind.REPLACE:
            previous = {p.id: p for p in self._partners}
            self._partners = [self._localize(p) for p in event.partners]
            for incoming in self._partners:
                self._record_remote_health(previous.get(incoming.id), incoming)
            log.info('store.remote_replace', partner_count=len(self._partners))
            return None

        if kind == PartnerChangeKind.DELETE:
            partner_id = event.target_id
            if not partner_id:
                raise ReconciliationError(
                    'Delete event has no partner id',
                    context={'kind': kind.value},
                )
            index = self._partner_index(partner_id)
            if index is None:
                log.info('store.remote_delete_unknown')
                return None
            removed = self._partners.pop(index)
            log.info('store.remote_delete')
            return removed

        if event.partner is None:
            raise ReconciliationError(
                f'{kind.value.capitalize()} event has no partner payload',
                context={'kind': kind.value, 'partner_id': event.partner_id},
            )

        incoming = self._localize(event.partner)
        index = self._partner_index(incoming.id)
        if index is None:
            self._partners.insert(0, incoming)
            log.info('store.remote_upsert', replaced=False)
        else:
            self._record_remote_health(self._partners[index], incoming)
            self._partners[index] = incoming
            log.info('store.remote_upsert', replaced=True)
        return incoming

    def apply_remote_changes(self, events: Iterable[PartnerChangeEvent]) -> PartialSuccessResult:
        """
        Apply remote change events one at a time.

        A malformed event is recorded as a failure and does not stop the
        remaining events.
        """
        result = PartialSuccessResult()
        for event in events:
            try:
                self.apply_remote_change(event)
            except ReconciliationError as exc:
                logger.warning(
                    'store.remote_change_rejected',
                    error=str(exc),
                    change_kind=PartnerChangeKind(event.kind).value,
                )
                result.add_failure(exc, item_id=event.target_id)
            else:
                result.add_success(
                    item_id=event.target_id,
                    data={'kind': PartnerChangeKind(event.kind).value},
                )
        return result

    # =========================================================================
    # Internals
    # =========================================================================

    def _partner_index(self, partner_id: str) -> int | None:
        for index, partner in enumerate(self._partners):
            if partner.id == partner_id:
                return index
        return None

    def _partner_name(self, partner: Partner | None) -> str:
        return partner.name if partner is not None else self.settings.UNKNOWN_PARTNER_NAME

    def _touch_partner(
        self,
        partner_id: str,
        now: datetime,
        open_threads_delta: int = 0,
    ) -> Partner | None:
        """Bump last_activity (never backward) and adjust the open-thread counter."""
        index = self._partner_index(partner_id)
        if index is None:
            return None
        current = self._partners[index]
        updated = current.model_copy(
            update={
                'last_activity': max(current.last_activity, now),
                'open_threads': current.open_threads + open_threads_delta,
            }
        )
        self._partners[index] = updated
        return updated

    def _record_health(
        self,
        partner_id: str,
        health: PartnerHealth,
        reason: str,
        when: datetime,
    ) -> HealthHistoryEntry:
        entry = HealthHistoryEntry(
            id=make_id('health'),
            partner_id=partner_id,
            health=health,
            reason=reason,
            date=when,
        )
        self._health_history.insert(0, entry)
        return entry

    def _record_health_change(
        self,
        previous: Partner,
        health: PartnerHealth,
        reason: str,
        when: datetime,
    ) -> HealthHistoryEntry:
        """Record a health change, first logging the prior value if the partner has no history."""
        if not any(h.partner_id == previous.id for h in self._health_history):
            self._record_health(
                previous.id,
                previous.health,
                'Health before first recorded change',
                min(previous.last_activity, when),
            )
        return self._record_health(previous.id, health, reason, when)

    def _record_remote_health(self, previous: Partner | None, incoming: Partner) -> None:
        if previous is None or previous.health == incoming.health:
            return
        self._record_health_change(
            previous,
            incoming.health,
            f'Health changed to {incoming.health.value} by remote sync',
            self.now(),
        )

    @staticmethod
    def _localize(partner: Partner) -> Partner:
        return partner.model_copy(update={'last_activity': as_local(partner.last_activity)})
