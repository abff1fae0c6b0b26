"""Tests for the order workflow state machine."""

from storefront.errors import ErrorCode
from storefront.models.checkout import CustomerInfo, WorkflowState
from storefront.models.order import OrderWorkflow

from conftest import FULL_CUSTOMER


def _customer(**overrides):
    data = dict(FULL_CUSTOMER)
    data.update(overrides)
    return CustomerInfo(**data)


class TestSubmit:
    def test_starts_in_editing(self):
        assert OrderWorkflow().state == WorkflowState.EDITING

    def test_success_moves_to_reviewing(self):
        workflow = OrderWorkflow()

        assert workflow.submit(2, _customer()) == []
        assert workflow.state == WorkflowState.REVIEWING

    def test_empty_cart_fails_even_with_full_customer(self):
        workflow = OrderWorkflow()

        issues = workflow.submit(0, _customer())

        assert [issue.code for issue in issues] == [ErrorCode.EMPTY_CART]
        assert workflow.state == WorkflowState.EDITING

    def test_empty_cart_and_blank_form_reports_both(self):
        workflow = OrderWorkflow()

        issues = workflow.submit(0, CustomerInfo())

        assert [issue.code for issue in issues] == [ErrorCode.EMPTY_CART, ErrorCode.INCOMPLETE_CUSTOMER_INFO]
        assert workflow.state == WorkflowState.EDITING

    def test_missing_fields_are_named(self):
        workflow = OrderWorkflow()

        issues = workflow.submit(1, _customer(email="", phone="   "))

        assert len(issues) == 1
        assert issues[0].code == ErrorCode.INCOMPLETE_CUSTOMER_INFO
        assert issues[0].fields == ["email", "phone"]
        assert workflow.state == WorkflowState.EDITING

    def test_each_field_is_required(self):
        for field in FULL_CUSTOMER:
            workflow = OrderWorkflow()
            issues = workflow.submit(1, _customer(**{field: ""}))
            assert issues[0].fields == [field]

    def test_format_is_not_validated(self):
        workflow = OrderWorkflow()

        assert workflow.submit(1, _customer(email="not-an-email", phone="call me")) == []


class TestConfirmCancel:
    def test_confirm_from_reviewing(self):
        workflow = OrderWorkflow()
        workflow.submit(1, _customer())

        assert workflow.confirm() == []
        assert workflow.state == WorkflowState.CONFIRMED

    def test_confirm_from_editing_is_invalid(self):
        workflow = OrderWorkflow()

        issues = workflow.confirm()

        assert issues[0].code == ErrorCode.INVALID_TRANSITION
        assert workflow.state == WorkflowState.EDITING

    def test_cancel_from_reviewing(self):
        workflow = OrderWorkflow()
        workflow.submit(1, _customer())

        assert workflow.cancel() == []
        assert workflow.state == WorkflowState.CANCELLED

    def test_cancel_from_editing_aborts(self):
        workflow = OrderWorkflow()

        assert workflow.cancel() == []
        assert workflow.state == WorkflowState.CANCELLED

    def test_terminal_states_reject_confirm_and_cancel(self):
        workflow = OrderWorkflow()
        workflow.submit(1, _customer())
        workflow.confirm()

        assert workflow.confirm()[0].code == ErrorCode.INVALID_TRANSITION
        assert workflow.cancel()[0].code == ErrorCode.INVALID_TRANSITION
        assert workflow.state == WorkflowState.CONFIRMED

    def test_submit_after_terminal_starts_new_attempt(self):
        workflow = OrderWorkflow()
        workflow.cancel()

        assert workflow.submit(1, _customer()) == []
        assert workflow.state == WorkflowState.REVIEWING

    def test_reopen_returns_review_to_editing(self):
        workflow = OrderWorkflow()
        workflow.submit(1, _customer())

        workflow.reopen()

        assert workflow.state == WorkflowState.EDITING
