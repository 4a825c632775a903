import pytest

from harbor_api.resources.immutable_tag_rules import ImmutableTagRules
from harbor_api.resources.retention import Retention
from harbor_api.resources.webhooks import Webhooks
from harbor_api.utils.constants import STOP_ACTION, HttpMethod


class TestRetention:
    @pytest.mark.asyncio
    async def test_metadata_and_policy(self, mock_transport, sent_request):
        retention = Retention(mock_transport)

        await retention.get_retention_metadata()
        assert sent_request()["path"] == "/retentions/metadatas"

        await retention.update_retention_policy(2, {"algorithm": "or"})
        request = sent_request()
        assert request["path"] == "/retentions/2"
        assert request["method"] == HttpMethod.PUT

    @pytest.mark.asyncio
    async def test_trigger_execution_defaults_to_real_run(self, mock_transport, sent_request):
        await Retention(mock_transport).trigger_retention_execution(2)

        request = sent_request()
        assert request["path"] == "/retentions/2/executions"
        assert request["method"] == HttpMethod.POST
        assert request["body"] == {"dry_run": False}

    @pytest.mark.asyncio
    async def test_stop_execution_uses_patch(self, mock_transport, sent_request):
        await Retention(mock_transport).stop_retention_execution(2, 11)

        request = sent_request()
        assert request["path"] == "/retentions/2/executions/11"
        assert request["method"] == HttpMethod.PATCH
        assert request["body"] == STOP_ACTION

    @pytest.mark.asyncio
    async def test_tasks_and_log(self, mock_transport, sent_request):
        retention = Retention(mock_transport)

        await retention.list_retention_tasks(2, 11)
        assert sent_request()["path"] == "/retentions/2/executions/11/tasks"

        await retention.get_retention_task_log(2, 11, 40)
        request = sent_request()
        assert request["path"] == "/retentions/2/executions/11/tasks/40"
        assert request["as_text"] is True


class TestImmutableTagRules:
    @pytest.mark.asyncio
    async def test_rules(self, mock_transport, sent_request):
        rules = ImmutableTagRules(mock_transport)

        await rules.list_immutable_tag_rules("library")
        assert sent_request()["path"] == "/projects/library/immutabletagrules"

        await rules.delete_immutable_tag_rule("library", 5)
        request = sent_request()
        assert request["path"] == "/projects/library/immutabletagrules/5"
        assert request["method"] == HttpMethod.DELETE


class TestWebhooks:
    @pytest.mark.asyncio
    async def test_policies(self, mock_transport, sent_request):
        webhooks = Webhooks(mock_transport)
        policy = {
            "name": "notify",
            "event_types": ["PUSH_ARTIFACT"],
            "targets": [{"type": "http", "address": "https://hooks.example.com"}],
        }

        await webhooks.create_webhook_policy("library", policy)
        request = sent_request()
        assert request["path"] == "/projects/library/webhook/policies"
        assert request["body"] == policy

        await webhooks.get_webhook_policy("library", 4)
        assert sent_request()["path"] == "/projects/library/webhook/policies/4"

    @pytest.mark.asyncio
    async def test_jobs_send_policy_id(self, mock_transport, sent_request):
        await Webhooks(mock_transport).list_webhook_jobs("library", 4)

        request = sent_request()
        assert request["path"] == "/projects/library/webhook/jobs"
        assert request["params"] == {"policy_id": 4, "page": 1, "page_size": 10}

    @pytest.mark.asyncio
    async def test_executions_tasks_and_log(self, mock_transport, sent_request):
        webhooks = Webhooks(mock_transport)

        await webhooks.list_webhook_executions("library", 4)
        assert sent_request()["path"] == "/projects/library/webhook/policies/4/executions"

        await webhooks.list_webhook_tasks("library", 4, 9)
        assert (
            sent_request()["path"]
            == "/projects/library/webhook/policies/4/executions/9/tasks"
        )

        await webhooks.get_webhook_task_log("library", 4, 9, 1)
        request = sent_request()
        assert request["path"].endswith("/executions/9/tasks/1/log")
        assert request["as_text"] is True

    @pytest.mark.asyncio
    async def test_project_webhook_metadata(self, mock_transport, sent_request):
        webhooks = Webhooks(mock_transport)

        await webhooks.get_webhook_last_trigger("library")
        assert sent_request()["path"] == "/projects/library/webhook/lasttrigger"

        await webhooks.get_supported_event_types("library")
        assert sent_request()["path"] == "/projects/library/webhook/events"
