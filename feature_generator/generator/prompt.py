from __future__ import annotations

PROMPT_TEMPLATE = """
You are a QA engineer writing behavior-driven acceptance tests.
Write a single Gherkin feature file that tests the API operation described by
the OpenAPI document given below as `schema`.

Rules:
1) Write the whole feature (keywords, names and steps) in the language whose
   ISO 639-1 code is given as `language`, using the localized Gherkin keywords.
2) Name the feature after `operationId`. If `apiId` is given, add it as a tag
   on the feature (for example `@pets`).
3) Add a `Background` with the base URL and the endpoint path of the operation.
4) Write one scenario for the successful response and one scenario for every
   documented error response. Use a `Scenario Outline` with `Examples` when the
   same request is checked with several parameter values.
5) Build request bodies and parameters from the schema, using realistic
   example values and the declared `example`/`default` values when present.
6) Check the response status code and the relevant fields of the response body.
7) Answer with the content of the feature file only: no markdown fences, no
   explanations before or after it.

""".lstrip()
