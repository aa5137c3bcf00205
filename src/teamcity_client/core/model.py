# -*- coding: utf-8 -*-
"""Reactive state machine driving the TeamCity client."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable

from teamcity_client.core.actions import (
    AcceptLoginError,
    Action,
    Logout,
    OpenInWebBrowser,
    RefreshList,
    ReturnToList,
    SelectBuild,
    SelectProjects,
    StartApp,
    SubmitCredentials,
    SubmitProjects,
)
from teamcity_client.core.derivation import (
    basic_credentials,
    classify_error,
    clears_session,
    combine_builds,
    selected_project_ids,
    to_selectable_projects,
)
from teamcity_client.core.repositories import BuildsRepository, LoginRepository
from teamcity_client.core.state import (
    INITIAL_STATE,
    LOADING_BUILDS_STATE,
    AppState,
    BuildsState,
    DetailsState,
    LoadingDetailsState,
    LoginError,
    LoginState,
    SelectProjectsDialogState,
    WebBrowserState,
)
from teamcity_client.core.state_stream import StateStream
from teamcity_client.core.task_runner import TaskRunner
from teamcity_client.integrations.teamcity_api import TeamCityApi
from teamcity_client.models.auth_data import AuthData
from teamcity_client.models.build import Build

logger = logging.getLogger(__name__)


class TeamCityModel:
    """
    Accepts actions, runs the matching API and repository calls, and emits
    the resulting states on ``state``.

    Every action that changes the state starts a new generation. Results of
    background calls are emitted only while their generation is still
    current, so the last issued action always wins.
    """

    def __init__(
        self,
        api: TeamCityApi,
        login_repository: LoginRepository,
        builds_repository: BuildsRepository,
        runner: TaskRunner | None = None,
        idle_timeout: float | None = None,
    ) -> None:
        self.api = api
        self.login_repository = login_repository
        self.builds_repository = builds_repository
        self.runner = runner or TaskRunner()
        self.idle_timeout = idle_timeout
        self._lock = threading.RLock()
        self.state = StateStream(INITIAL_STATE, lock=self._lock)

        self._generation = 0
        self._selected_build: Build | None = None

        self._handlers: dict[type, Callable[[Any], None]] = {
            StartApp: self._start_app,
            SubmitCredentials: self._submit_credentials,
            RefreshList: self._refresh_list,
            SelectProjects: self._select_projects,
            SubmitProjects: self._submit_projects,
            SelectBuild: self._select_build,
            OpenInWebBrowser: self._open_in_web_browser,
            ReturnToList: self._refresh_list,
            Logout: self._logout,
            AcceptLoginError: self._accept_login_error,
        }

    @property
    def current_state(self) -> AppState:
        return self.state.value

    @property
    def selected_build(self) -> Build | None:
        with self._lock:
            return self._selected_build

    def perform(self, action: Action) -> None:
        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"Unsupported action: {action!r}")
        logger.info("Performing %s", type(action).__name__)
        with self._lock:
            try:
                handler(action)
            except Exception:
                logger.exception("Action %s failed", type(action).__name__)
                self._advance()
                self._emit(LoginState(error=LoginError.NETWORK_PROBLEM))

    def wait_for_idle(self, timeout: float | None = None) -> bool:
        """Block until background work settled. Returns False on timeout.

        Without ``timeout`` the model-wide ``idle_timeout`` applies.
        """
        return self.runner.wait_for_all(timeout=timeout if timeout is not None else self.idle_timeout)

    def close(self, wait_for_tasks: bool = True) -> None:
        self.runner.shutdown(wait_for_tasks=wait_for_tasks)

    # ------------------------------------------------------------------
    # Action handlers (called with the model lock held)
    # ------------------------------------------------------------------

    def _start_app(self, action: StartApp) -> None:
        auth_data = self.login_repository.auth_data
        if auth_data is None:
            self._advance()
            self._emit(LoginState())
            return
        self._configure_api(auth_data)
        self._load_builds()

    def _submit_credentials(self, action: SubmitCredentials) -> None:
        auth_data = AuthData(action.address, action.credentials)
        logger.info("Logging in to %s as %s", auth_data.address, auth_data.user)
        self.login_repository.auth_data = auth_data
        self._configure_api(auth_data)
        self._load_builds()

    def _refresh_list(self, action: Action) -> None:
        if self.login_repository.auth_data is None:
            logger.info("Not logged in, showing login instead of the build list")
            self._advance()
            self._emit(LoginState())
            return
        self._load_builds()

    def _select_projects(self, action: SelectProjects) -> None:
        generation = self._advance()
        selected = self.builds_repository.selected_projects

        def _on_complete(futures: list[Future]) -> None:
            with self._lock:
                if not self._is_current(generation, "projects"):
                    return
                error = self._first_error(futures)
                if error is not None:
                    self._fail(error)
                    return
                projects = futures[0].result()
                self._emit(SelectProjectsDialogState(to_selectable_projects(projects, selected)))

        self.runner.gather("projects", [self.api.get_projects], _on_complete)

    def _submit_projects(self, action: SubmitProjects) -> None:
        self.builds_repository.selected_projects = list(action.selected)
        self._load_builds()

    def _select_build(self, action: SelectBuild) -> None:
        generation = self._advance()
        build = action.build
        self._selected_build = build
        self._emit(LoadingDetailsState(build))

        def _on_complete(futures: list[Future]) -> None:
            with self._lock:
                if not self._is_current(generation, "changes"):
                    return
                error = self._first_error(futures)
                if error is not None:
                    self._fail(error)
                    return
                self._emit(DetailsState(build, futures[0].result()))

        self.runner.gather("changes", [lambda: self.api.get_changes(build.id)], _on_complete)

    def _open_in_web_browser(self, action: OpenInWebBrowser) -> None:
        if self._selected_build is None:
            logger.warning("No build selected, ignoring OpenInWebBrowser")
            return
        self._advance()
        self._emit(WebBrowserState(self._selected_build.web_url))

    def _logout(self, action: Logout) -> None:
        self._advance()
        self._clear_session()
        self._emit(LoginState())

    def _accept_login_error(self, action: AcceptLoginError) -> None:
        current = self.state.value
        if not isinstance(current, LoginState) or current.error is None:
            return
        self._advance()
        self._emit(current.without_error())

    # ------------------------------------------------------------------
    # Build list pipeline
    # ------------------------------------------------------------------

    def _load_builds(self) -> None:
        generation = self._advance()
        self._emit(LOADING_BUILDS_STATE)
        project_ids = selected_project_ids(self.builds_repository.selected_projects)
        if project_ids:
            started_call = lambda: self.api.get_builds_for_projects(project_ids)  # noqa: E731
        else:
            started_call = self.api.get_builds

        def _on_complete(futures: list[Future]) -> None:
            with self._lock:
                if not self._is_current(generation, "builds"):
                    return
                # Build failures are classified before project failures.
                error = self._first_error(futures)
                if error is not None:
                    self._fail(error)
                    return
                queued, started, projects = (future.result() for future in futures)
                self._emit(BuildsState(combine_builds(queued, started), projects))

        self.runner.gather("builds", [self.api.get_queued_builds, started_call, self.api.get_projects], _on_complete)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _advance(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int, job: str) -> bool:
        if generation != self._generation:
            logger.debug("Dropping stale %s result (generation %d, current %d)", job, generation, self._generation)
            return False
        return True

    def _configure_api(self, auth_data: AuthData) -> None:
        self.api.set_address(auth_data.address)
        self.api.credentials = basic_credentials(auth_data.credentials)

    @staticmethod
    def _first_error(futures: list[Future]) -> BaseException | None:
        for future in futures:
            error = future.exception()
            if error is not None:
                return error
        return None

    def _fail(self, exc: BaseException) -> None:
        error = classify_error(exc)
        logger.warning("Request failed (%s): %s", error.name, exc)
        if clears_session(error):
            self._clear_session()
        self._emit(LoginState(error=error))

    def _clear_session(self) -> None:
        self._selected_build = None
        self.login_repository.auth_data = None
        self.builds_repository.selected_projects = []

    def _emit(self, state: AppState) -> None:
        logger.debug("Emitting %s", type(state).__name__)
        self.state.emit(state)
