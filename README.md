# addonmeta

A library of validators that check add-on metadata. Each validator has a
stable code of the form `AM0002` and returns a `Result` that is a
success, a failure carrying messages, or an error. A `Runner` runs a
chosen set of validators concurrently against one piece of metadata.

## What is checked

| Code   | Module                        | Check |
|--------|-------------------------------|-------|
| AM0002 | `addonmeta.validators.am0002` | The add-on label is `api.openshift.com/addon-<id>` |
| AM0004 | `addonmeta.validators.am0004` | The icon is base64 encoded PNG data |
| AM0006 | `addonmeta.validators.am0006` | The Dead Man's Snitch name postfix does not begin with `hive-` |
| AM0008 | `addonmeta.validators.am0008` | The target namespace is listed, and every namespace starts with `redhat-` |
| AM0009 | `addonmeta.validators.am0009` | Parameter defaults agree with their validation regex or their options |
| AM0011 | `addonmeta.validators.am0011` | A quota rule exists in OCM for the quota name |
| AM0013 | `addonmeta.validators.am0013` | Every add-on requirement carries data |
| AM0016 | `addonmeta.validators.am0016` | Catalog source, secret and credentials request names are unique |
| AM0017 | `addonmeta.validators.am0017` | A pull secret name, when set, names one of the configured secrets |

`addonmeta.catalog.default_initializers()` returns the initializers for
all of them, in code order.

## The metadata the validators read

The package has no metadata model of its own. A validator's `run` takes
any object with an `addon_meta` attribute, and reads these attributes
from it (a missing attribute counts as empty):

- `id`, `label`, `icon`, `target_namespace`, `namespaces`,
  `ocm_quota_name`, `pull_secret_name`
- `deadmans_snitch.snitch_name_post_fix`
- `addon_parameters`: items with `validation`, `options` (items with
  `value`), `default_value` and `validation_err_msg`
- `addon_requirements`: items with `id` and `data`
- `additional_catalog_sources`, `credentials_requests` and
  `config.secrets`: items with `name`

`types.SimpleNamespace` or your own dataclasses will do.

## Running validators

```python
from types import SimpleNamespace

from addonmeta.catalog import default_initializers
from addonmeta.runner import Runner, matches_codes, negate
from addonmeta.validator import parse_code

meta_bundle = SimpleNamespace(
    addon_meta=SimpleNamespace(
        id="reference-addon",
        label="api.openshift.com/addon-reference-addon",
        target_namespace="redhat-reference-addon",
        namespaces=["redhat-reference-addon"],
    )
)

runner = Runner(initializers=default_initializers())

# Leave out the check that needs a live OCM connection.
skip_ocm = negate(matches_codes(parse_code("AM0011")))

for result in runner.run(meta_bundle, skip_ocm):
    status = "ok" if result.is_success() else "failed"
    print(result.code, result.name, status, result.failure_msgs)
```

`run` yields results as the validators finish, so their order is not
fixed. `get_validators` takes the same filters and returns the
validators sorted by code; `str()` of a code gives the `AM0002` form:

```python
for validator in runner.get_validators(skip_ocm):
    print(validator.code, validator.name, validator.description)
```

A filter is any callable that takes a validator and returns a bool;
`None` in place of a filter accepts everything. `parse_code` accepts
codes in either case (`AM0008` or `am0008`) and raises `ValueError` for
anything not of the form `AMXXXX`.

A `ResultList` (a `list` subclass) gathers results: `has_failure()` is
true if any result is not a success, and `errors()` returns the errors
the results carry.

If two initializers produce validators with the same code, `Runner`
raises `DuplicateCodeError`.

## Registering validators

`Runner()` given no initializers uses those queued with
`addonmeta.runner.register`. `addonmeta.catalog.register_defaults()`
queues the built-in validators (once, however often it is called):

```python
from addonmeta.catalog import register_defaults
from addonmeta.runner import Runner

register_defaults()
runner = Runner()
```

## Writing a validator

Subclass `addonmeta.validator.Base`, give it a code, name and
description, and build results with `success()`, `fail(*messages)`,
`error(err)` and `retryable_error(err)`. An initializer is any callable
that takes a `Dependencies` (logger, OCM client, registry client and a
`ValidatorConfig`) and returns the validator.

```python
from addonmeta.validator import Base


class HasId(Base):
    def __init__(self):
        super().__init__(100, "has_id", "The add-on has an id")

    def run(self, meta_bundle):
        if not getattr(meta_bundle.addon_meta, "id", ""):
            return self.fail("no id")
        return self.success()


runner = Runner(initializers=[lambda deps: HasId()])
```

## Retrying flaky checks

AM0011 reports OCM server-side failures (status 500–599) as retryable.
`RetryMiddleware` runs a validator again, up to `max_attempts` runs in
all (default 5), sleeping `delay` seconds (default 2.0) between runs,
while its result is a retryable error:

```python
from addonmeta.middleware import RetryMiddleware

runner = Runner(
    initializers=default_initializers(),
    middleware=[RetryMiddleware(max_attempts=3, delay=1.0)],
)
```

## Remote services

Without an OCM client the runner uses a `DisconnectedOCMClient`, whose
lookups raise `OCMClientDisconnectedError`, so AM0011 returns an error
result instead of reaching out. To check quota rules against OCM, pass
an `OCMClient`; it needs an access token, talks to
`https://api.stage.openshift.com` unless given another `api_url`, and
raises `OCMResponseError` for HTTP error statuses:

```python
from addonmeta.ocm_client import OCMClient

with OCMClient(access_token="token") as ocm:
    runner = Runner(initializers=default_initializers(), ocm_client=ocm)
```

`V2RegistryClient(base_url).has_reference(ImageReference(short_name, tag))`
asks a registry whether a manifest exists; `new_quay_client()` returns
one pointed at quay.io. It is what the runner hands to validators as
their registry client when none is given; none of the built-in
validators uses it.

## Excluding namespaces

Namespaces that AM0008 should not hold to the `redhat-` prefix rule can
be passed to the runner:

```python
runner = Runner(
    initializers=default_initializers(),
    excluded_namespaces=["reference-addon"],
)
```

## What this package does not do

- There is no command-line tool; validators are run from Python.
- It does not read metadata files or pull operator bundles or index
  images; you build the metadata object yourself.
- It has no checks on operator bundle contents such as channels,
  install modes, permissions or deployments, and no check that a test
  harness image exists.