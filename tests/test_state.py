# tests/test_state.py
"""Tests for studiofolio.ui.state"""

from studiofolio.models.catalog import find_item, find_service
from studiofolio.ui.state import AppState, SubmitState, ViewState


class TestViewState:
    """Tests for ViewState enum"""

    def test_view_state_values(self):
        assert ViewState.LANDING.value == "landing"
        assert ViewState.PROJECT_DETAIL.value == "project_detail"
        assert ViewState.SERVICE_PROJECT_LIST.value == "service_project_list"


class TestSubmitState:
    """Tests for SubmitState enum"""

    def test_submit_state_values(self):
        assert SubmitState.IDLE.value == "idle"
        assert SubmitState.SUBMITTING.value == "submitting"
        assert SubmitState.SUCCESS.value == "success"
        assert SubmitState.FAILURE.value == "failure"


class TestAppStateDefaults:
    """Tests for AppState default values"""

    def test_default_view(self):
        state = AppState()
        assert state.view == ViewState.LANDING
        assert state.is_landing()
        assert state.current_project is None
        assert state.current_service is None
        assert state.pending_scroll is None

    def test_default_modal_state(self):
        state = AppState()
        assert state.selected_item is None
        assert state.is_modal_open() is False
        assert state.carousel.index == 0
        assert state.carousel is not state.detail_carousel

    def test_default_form_state(self):
        state = AppState()
        assert state.form.is_empty()
        assert state.submit_state == SubmitState.IDLE
        assert state.submit_message == ""
        assert state.can_submit()

    def test_instances_do_not_share_form(self):
        a, b = AppState(), AppState()
        a.form.update("name", "Ada")
        assert b.form.name == ""


class TestAppStateResetFormState:
    """Tests for AppState.reset_form_state()"""

    def test_reset_clears_form_and_message(self):
        state = AppState(submit_state=SubmitState.SUCCESS, submit_message="Thanks", submit_message_is_error=True)
        state.form.update("email", "ada@example.com")
        state.reset_form_state()
        assert state.form.is_empty()
        assert state.submit_state == SubmitState.IDLE
        assert state.submit_message == ""
        assert state.submit_message_is_error is False

    def test_is_submitting(self):
        state = AppState(submit_state=SubmitState.SUBMITTING)
        assert state.is_submitting()
        assert state.can_submit() is False


class TestAppStateToDict:

    def test_focus_pointers_serialized_as_ids(self):
        state = AppState(
            view=ViewState.PROJECT_DETAIL,
            current_project=find_item(3),
            selected_item=find_item(1),
            pending_scroll="work",
        )
        data = state.to_dict()
        assert data["view"] == "project_detail"
        assert data["current_project"] == 3
        assert data["selected_item"] == 1
        assert data["current_service"] is None
        assert data["pending_scroll"] == "work"
        assert data["form"] == {"name": "", "email": "", "phone": "", "service": "", "message": ""}

    def test_service_pointer(self):
        state = AppState(current_service=find_service("web-design"))
        assert state.to_dict()["current_service"] == "web-design"
