# terrakube

A small Python client for the Terrakube API. It speaks JSON:API
(`application/vnd.api+json`) over HTTP with bearer-token authentication and
covers these resources:

| Model               | Service                    | Module                         | Scope                    |
|---------------------|----------------------------|--------------------------------|--------------------------|
| `Workspace`         | `WorkspaceService`         | `terrakube.workspace`          | organization             |
| `Variable`          | `VariableService`          | `terrakube.variable`           | organization / workspace |
| `VCS`               | `VCSService`               | `terrakube.vcs`                | organization             |
| `WorkspaceAccess`   | `WorkspaceAccessService`   | `terrakube.workspace_access`   | organization / workspace |
| `WorkspaceSchedule` | `WorkspaceScheduleService` | `terrakube.workspace_schedule` | workspace                |
| `WorkspaceTag`      | `WorkspaceTagService`      | `terrakube.workspace_tag`      | organization / workspace |

Every service offers the same five operations: `list`, `get`, `create`,
`update` and `delete`.

## Installation

```
pip install terrakube
```

For running the test suite:

```
pip install "terrakube[test]"
pytest
```

## The transport

`terrakube.crud.Transport` holds the endpoint, the token and a
`requests.Session`. Requests carry `Accept: application/vnd.api+json` and
`Authorization: Bearer <token>` (when a token is given), bodies are sent with
`Content-Type: application/vnd.api+json`, and all paths live under
`/api/v1/` on the endpoint. Each path segment is percent-escaped.

If you pass no session, the transport creates one and closes it in
`close()`; a session you pass in yourself is left open. The transport is
also a context manager:

```python
from terrakube.crud import Transport

with Transport("https://terrakube.example.com", "token") as transport:
    ...
```

## Working with a service

Each service is built on a transport. The model class is taken from the
service unless you pass one explicitly:

```python
from terrakube.crud import ListOptions, Transport
from terrakube.variable import Variable, VariableService

with Transport("https://terrakube.example.com", "token") as transport:
    variables = VariableService(transport)

    created = variables.create(
        "org-1",
        "ws-1",
        Variable(key="AWS_REGION", value="us-east-1", category="ENV"),
    )

    for var in variables.list("org-1", "ws-1", ListOptions(filter="key==AWS_REGION")):
        print(var.id, var.key, var.value)

    created.value = "us-west-2"
    variables.update("org-1", "ws-1", created)

    variables.delete("org-1", "ws-1", created.id)
```

`update` takes the model itself; its `id` must be set. A filter given in
`ListOptions` is sent as `filter[<resource type>]`, for example
`filter[variable]`, `filter[workspace]`, `filter[access]`,
`filter[schedule]` or `filter[workspacetag]`.

Models are dataclasses with Python attribute names; some differ from the
wire names, for example `Workspace.template_id` (`defaultTemplate`),
`Workspace.iac_version` (`terraformVersion`) and
`WorkspaceSchedule.schedule` (`cron`). A `Workspace` may carry its `VCS`
connection as a relationship, which is decoded from `included` resources
when the server sends them.

Boolean attributes such as `Variable.sensitive`, `Variable.hcl` or
`WorkspaceAccess.manage_state` are always sent, including when they are
`False`.

## Errors

- `ValidationError` (a `ValueError`) is raised before any request is made
  when a required identifier is empty. Its `field` names the identifier
  (for example `"organization ID"`, `"workspaceID"`, `"tagID"`) and its
  `message` is `"must not be empty"`.
- `APIError` is raised when the server answers with a status of 400 or
  above. It carries `status_code`, `message` (taken from the JSON:API
  `errors` details or titles when present, otherwise the response text) and
  the raw `body`.
- `is_not_found(err)` tells whether an error is a 404 from the server.

```python
from terrakube.errors import APIError, is_not_found

try:
    variables.get("org-1", "ws-1", "missing")
except APIError as err:
    if is_not_found(err):
        print("no such variable")
    else:
        raise
```

## JSON:API helpers

`terrakube.jsonapi` holds the encoder and decoder the services use:
`marshal_payload`, `unmarshal_payload` and `unmarshal_many_payload`, plus
`encode_resource` and `decode_resource` for single resource objects. Models
declare their fields with `attr(name, default)` and `relation(name)` and
name their resource type in a `jsonapi_type` class variable.

## What this package does not do

- It has no service for workspace webhooks or webhook events.
- It has no single client object that bundles the services; build each
  service on a `Transport` yourself.
- It has no command-line interface.