"""Build the Pod that runs SchemaHero migrations against the kotsadm database.

`MigrationPodBuilder` is the entry point. It takes `DeploymentOptions` and
returns a fresh `V1Pod` that the caller submits to the cluster.
"""
