import pytest

from harbor_api.core.options import ListOptions, ListProjectsOptions
from harbor_api.resources.projects import Projects
from harbor_api.resources.repositories import Repositories
from harbor_api.utils.constants import HttpMethod, REQUEST_ID_HEADER


class TestProjects:
    @pytest.mark.asyncio
    async def test_list_projects_default_paging(self, mock_transport, sent_request):
        mock_transport.request.return_value = [{"name": "library"}]

        result = await Projects(mock_transport).list_projects()

        assert result == [{"name": "library"}]
        request = sent_request()
        assert request["path"] == "/projects"
        assert request["method"] == HttpMethod.GET
        assert request["params"] == {"page": 1, "page_size": 10}
        assert request["body"] is None
        assert REQUEST_ID_HEADER in request["headers"]

    @pytest.mark.asyncio
    async def test_list_projects_with_filters(self, mock_transport, sent_request):
        options = ListProjectsOptions(name="lib", public=True, page_size=100)

        await Projects(mock_transport).list_projects(options)

        assert sent_request()["params"] == {
            "page": 1,
            "page_size": 100,
            "name": "lib",
            "public": True,
        }

    @pytest.mark.asyncio
    async def test_create_project(self, mock_transport, sent_request):
        project = {"project_name": "demo", "metadata": {"public": "false"}}

        await Projects(mock_transport).create_project(project)

        request = sent_request()
        assert request["path"] == "/projects"
        assert request["method"] == HttpMethod.POST
        assert request["body"] == project

    @pytest.mark.asyncio
    async def test_project_paths(self, mock_transport, sent_request):
        projects = Projects(mock_transport)

        await projects.get_project("my project")
        assert sent_request()["path"] == "/projects/my%20project"

        await projects.update_project(3, {"metadata": {"public": "true"}})
        assert sent_request()["path"] == "/projects/3"
        assert sent_request()["method"] == HttpMethod.PUT

        await projects.delete_project("demo")
        assert sent_request()["method"] == HttpMethod.DELETE

        await projects.get_project_deletable("demo")
        assert sent_request()["path"] == "/projects/demo/_deletable"

        await projects.get_project_summary("demo")
        assert sent_request()["path"] == "/projects/demo/summary"


class TestRepositories:
    @pytest.mark.asyncio
    async def test_list_all_repositories(self, mock_transport, sent_request):
        await Repositories(mock_transport).list_all_repositories(
            ListOptions(query="name=~nginx")
        )

        request = sent_request()
        assert request["path"] == "/repositories"
        assert request["params"] == {"page": 1, "page_size": 10, "q": "name=~nginx"}

    @pytest.mark.asyncio
    async def test_list_repositories_of_project(self, mock_transport, sent_request):
        await Repositories(mock_transport).list_repositories("library")

        assert sent_request()["path"] == "/projects/library/repositories"

    @pytest.mark.asyncio
    async def test_repository_name_is_double_encoded(self, mock_transport, sent_request):
        await Repositories(mock_transport).get_repository("library", "team/nginx")

        assert sent_request()["path"] == "/projects/library/repositories/team%252Fnginx"

    @pytest.mark.asyncio
    async def test_update_and_delete_repository(self, mock_transport, sent_request):
        repositories = Repositories(mock_transport)

        await repositories.update_repository("library", "nginx", {"description": "web"})
        request = sent_request()
        assert request["method"] == HttpMethod.PUT
        assert request["body"] == {"description": "web"}

        await repositories.delete_repository("library", "nginx")
        assert sent_request()["method"] == HttpMethod.DELETE
