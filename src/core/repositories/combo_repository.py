"""Abstract contract for combo persistence."""

from abc import ABC, abstractmethod

from core.models.combo import Combo, NewCombo, RemovedCombo, VoteResult, VoteType


class ComboRepository(ABC):
    """Contract for storing, enumerating and voting on combos.

    Implementations could be DynamoDB, MongoDB, PostgreSQL, etc.
    The service depends on this interface, not the implementation.
    No business validation happens here.
    """

    @abstractmethod
    def insert(self, *, combo: NewCombo) -> Combo:
        """Persist a new combo with both counters set to zero.

        Args:
            combo: Validated combo fields including both image URLs

        Returns:
            The stored combo, including its assigned id

        Raises:
            StoreError: If the store is unreachable or rejects the write
        """

    @abstractmethod
    def list_all(self) -> list[Combo]:
        """Return a snapshot of every combo in store enumeration order.

        Raises:
            StoreError: If the scan fails
        """

    @abstractmethod
    def count(self) -> int:
        """Return the current number of stored items, malformed ones included.

        Raises:
            StoreError: If the count fails
        """

    @abstractmethod
    def fetch_at(self, *, offset: int) -> Combo | None:
        """Return the combo at a zero-based position in enumeration order.

        Args:
            offset: Zero-based position

        Returns:
            The combo, or None if offset is out of range

        Raises:
            StoreError: If the scan fails
        """

    @abstractmethod
    def increment_vote(self, *, combo_id: str, field: VoteType) -> VoteResult:
        """Atomically add one to the `bite` or `ban` counter of a combo.

        Args:
            combo_id: Combo identifier
            field: Counter to increment

        Returns:
            VoteResult with `matched=False` when no combo has this id

        Raises:
            StoreError: If the update fails for any other reason
        """

    @abstractmethod
    def delete_by_id(self, *, combo_id: str) -> RemovedCombo | None:
        """Remove a combo. Removing a missing id is not an error.

        Args:
            combo_id: Combo identifier

        Returns:
            Id and image keys of the removed record, or None if nothing matched

        Raises:
            StoreError: If the deletion fails
        """
