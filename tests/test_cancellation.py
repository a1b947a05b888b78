import asyncio

import pytest

from fast_rules import (
    AsyncPredicateValidator,
    CancellationToken,
    OperationCancelledException,
    PropertyValidator,
    ValidationContext,
)


class SlowLookup(PropertyValidator):
    """Honours the token at its suspension point."""
    fallback_key = "PredicateValidator"

    async def is_valid_async(self, context, cancellation):
        await cancellation.guard(asyncio.sleep(10))
        return True

    def is_valid(self, context):
        return True


class IgnoresToken(PropertyValidator):
    fallback_key = "PredicateValidator"

    async def is_valid_async(self, context, cancellation):
        await asyncio.sleep(0.01)
        return False

    def is_valid(self, context):
        return False


def make_context(value=None):
    return ValidationContext(property_value=value, property_name="Name")


def test_token_state():
    token = CancellationToken()
    assert token.is_cancellation_requested is False
    token.raise_if_cancellation_requested()

    token.cancel()
    assert token.is_cancellation_requested is True
    with pytest.raises(OperationCancelledException):
        token.raise_if_cancellation_requested()


def test_cancellation_is_distinct_from_task_cancellation():
    assert not issubclass(OperationCancelledException, asyncio.CancelledError)


@pytest.mark.asyncio
async def test_guard_returns_result_when_not_cancelled():
    async def compute():
        return 42

    assert await CancellationToken().guard(compute()) == 42


@pytest.mark.asyncio
async def test_already_cancelled_token_aborts_before_check():
    token = CancellationToken()
    token.cancel()
    with pytest.raises(OperationCancelledException):
        await IgnoresToken().validate_async(make_context(), token)


@pytest.mark.asyncio
async def test_cancel_during_check_raises_instead_of_returning_verdict():
    token = CancellationToken()
    context = make_context()
    task = asyncio.ensure_future(SlowLookup().validate_async(context, token))
    await asyncio.sleep(0.01)
    token.cancel()

    with pytest.raises(OperationCancelledException):
        await task
    assert context.message_formatter.placeholder_values == {}


@pytest.mark.asyncio
async def test_rule_ignoring_token_completes_normally():
    token = CancellationToken()
    task = asyncio.ensure_future(IgnoresToken().validate_async(make_context(), token))
    await asyncio.sleep(0)
    token.cancel()

    failures = await task
    assert len(failures) == 1


@pytest.mark.asyncio
async def test_async_predicate_is_raced_against_token():
    started = asyncio.Event()

    async def never_finishes(instance, value, context, cancellation):
        started.set()
        await asyncio.sleep(10)
        return True

    token = CancellationToken()
    task = asyncio.ensure_future(AsyncPredicateValidator(never_finishes).validate_async(make_context(), token))
    await started.wait()
    token.cancel()

    with pytest.raises(OperationCancelledException):
        await task


class BrokenLookup(PropertyValidator):
    fallback_key = "PredicateValidator"

    async def is_valid_async(self, context, cancellation):
        await asyncio.sleep(0)
        raise ConnectionError("lookup unavailable")

    def is_valid(self, context):
        return True


async def failing_predicate(instance, value, context, cancellation):
    await asyncio.sleep(0)
    raise RuntimeError("predicate failed")


@pytest.mark.asyncio
async def test_async_predicate_exception_propagates_without_token():
    context = make_context("x")
    with pytest.raises(RuntimeError, match="predicate failed"):
        await AsyncPredicateValidator(failing_predicate).validate_async(context)
    assert context.message_formatter.placeholder_values == {}


@pytest.mark.asyncio
async def test_async_predicate_exception_propagates_through_guard():
    with pytest.raises(RuntimeError, match="predicate failed"):
        await AsyncPredicateValidator(failing_predicate).validate_async(make_context("x"), CancellationToken())


@pytest.mark.asyncio
async def test_async_check_exception_propagates():
    with pytest.raises(ConnectionError):
        await BrokenLookup().validate_async(make_context(), CancellationToken())


def test_token_can_be_reused_across_event_loops():
    token = CancellationToken()

    async def compute():
        await asyncio.sleep(0)
        return "done"

    assert asyncio.run(token.guard(compute())) == "done"
    assert asyncio.run(token.guard(compute())) == "done"

    token.cancel()
    with pytest.raises(OperationCancelledException):
        asyncio.run(token.guard(compute()))


def test_cancel_wakes_waiter_on_second_loop():
    token = CancellationToken()

    async def wait_briefly():
        await asyncio.wait_for(token.wait(), timeout=0.01)

    with pytest.raises(asyncio.TimeoutError):
        asyncio.run(wait_briefly())

    async def cancel_while_guarded():
        task = asyncio.ensure_future(token.guard(asyncio.sleep(10)))
        await asyncio.sleep(0.01)
        token.cancel()
        await task

    with pytest.raises(OperationCancelledException):
        asyncio.run(cancel_while_guarded())
