"""Exceptions raised by the blackjack engine."""


class BlackjackError(Exception):
    """Base class for engine errors."""


class IllegalActionError(BlackjackError):
    """An action was requested that the current round state does not allow.

    This is a contract violation by the caller: every state exposes its legal
    actions, so a well-formed caller never triggers it.
    """

    def __init__(self, action: str, state: str) -> None:
        super().__init__(f"Cannot {action} during {state}")
        self.action = action
        self.state = state


class InsufficientFundsError(BlackjackError):
    """A bet is not positive or exceeds the available balance."""

    def __init__(self, amount: int, balance: int) -> None:
        if amount <= 0:
            message = f"Bet must be positive, got {amount}"
        else:
            message = f"Bet of ${amount} exceeds balance of ${balance}"
        super().__init__(message)
        self.amount = amount
        self.balance = balance
