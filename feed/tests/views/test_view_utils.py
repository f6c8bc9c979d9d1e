import json

from django.core.exceptions import ImproperlyConfigured, PermissionDenied
from django.http import Http404
from django.test import RequestFactory, SimpleTestCase, TestCase
from django.views import View

from feed.forms import CommentForm
from feed.views.decorators import LoginProhibitedMixin, json_error_boundary
from feed.views.view_utils import (
    forbidden,
    request_data,
    validation_error_response,
    wants_json,
)


class WantsJsonTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_json_accept_header(self):
        self.assertTrue(wants_json(self.factory.get("/", HTTP_ACCEPT="application/json")))
        self.assertTrue(wants_json(self.factory.get("/", HTTP_ACCEPT="application/vnd.api+json; q=1")))

    def test_html_first_is_not_json(self):
        request = self.factory.get("/", HTTP_ACCEPT="text/html,application/json")
        self.assertFalse(wants_json(request))

    def test_xhr_header(self):
        self.assertTrue(wants_json(self.factory.get("/", HTTP_X_REQUESTED_WITH="XMLHttpRequest")))

    def test_no_header(self):
        self.assertFalse(wants_json(self.factory.get("/")))


class RequestDataTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_json_body(self):
        request = self.factory.put("/", json.dumps({"content": "hi"}), content_type="application/json")
        self.assertEqual(request_data(request), {"content": "hi"})

    def test_malformed_or_non_object_json_is_empty(self):
        bad = self.factory.post("/", "{not json", content_type="application/json")
        listed = self.factory.post("/", "[1, 2]", content_type="application/json")
        self.assertEqual(request_data(bad), {})
        self.assertEqual(request_data(listed), {})

    def test_form_post(self):
        request = self.factory.post("/", {"content": "hi"})
        self.assertEqual(request_data(request)["content"], "hi")

    def test_urlencoded_put(self):
        request = self.factory.put("/", "content=hi", content_type="application/x-www-form-urlencoded")
        self.assertEqual(request_data(request)["content"], "hi")


class ErrorResponseTests(TestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_validation_error_response(self):
        form = CommentForm(data={"content": ""})
        form.is_valid()
        response = validation_error_response(form)
        self.assertEqual(response.status_code, 422)
        body = json.loads(response.content)
        self.assertEqual(body["message"], "The given data was invalid.")
        self.assertEqual(list(body["errors"]), ["content"])

    def test_forbidden_json(self):
        response = forbidden(self.factory.get("/", HTTP_ACCEPT="application/json"), "Nope")
        self.assertEqual(response.status_code, 403)
        self.assertEqual(json.loads(response.content), {"error": "Nope"})

    def test_forbidden_html_raises(self):
        with self.assertRaises(PermissionDenied):
            forbidden(self.factory.get("/"))


class JsonErrorBoundaryTests(SimpleTestCase):
    def setUp(self):
        self.request = RequestFactory().get("/")

    def test_passes_through_result(self):
        view = json_error_boundary("Failed")(lambda request: "ok")
        self.assertEqual(view(self.request), "ok")

    def test_http_errors_propagate(self):
        for error in (Http404, PermissionDenied):
            with self.subTest(error=error):
                def view(request, error=error):
                    raise error()
                with self.assertRaises(error):
                    json_error_boundary("Failed")(view)(self.request)

    def test_unexpected_error_logged_as_500(self):
        def view(request):
            raise ValueError("kaboom")
        wrapped = json_error_boundary("Failed to do thing", key="message")(view)
        with self.assertLogs("feed.views.decorators", level="ERROR") as logs:
            response = wrapped(self.request)
        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.content), {"message": "Failed to do thing"})
        self.assertIn("Failed to do thing", logs.output[0])


class LoginProhibitedMixinTests(SimpleTestCase):
    def test_missing_redirect_target_is_a_configuration_error(self):
        class AnonymousOnly(LoginProhibitedMixin, View):
            pass

        with self.assertRaises(ImproperlyConfigured):
            AnonymousOnly().get_redirect_when_logged_in_url()
