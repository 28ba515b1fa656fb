"""Built-in catalog of deprecated and removed Kubernetes APIs."""

from typing import Dict, List


def _api(api_version: str, kind: str) -> str:
    return f"apiVersion: {api_version}\nkind: {kind}\n"


# Order matters: the extensions/v1beta1 Ingress entry produces text that the
# networking.k8s.io/v1beta1 Ingress entry maps again on 1.22+ clusters.
DEFAULT_MAPPINGS: List[Dict[str, str]] = [
    {
        "deprecatedAPI": _api("extensions/v1beta1", "Deployment"),
        "newAPI": _api("apps/v1", "Deployment"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("apps/v1beta1", "Deployment"),
        "newAPI": _api("apps/v1", "Deployment"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("apps/v1beta2", "Deployment"),
        "newAPI": _api("apps/v1", "Deployment"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("apps/v1beta1", "StatefulSet"),
        "newAPI": _api("apps/v1", "StatefulSet"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("apps/v1beta2", "StatefulSet"),
        "newAPI": _api("apps/v1", "StatefulSet"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("extensions/v1beta1", "DaemonSet"),
        "newAPI": _api("apps/v1", "DaemonSet"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("apps/v1beta2", "DaemonSet"),
        "newAPI": _api("apps/v1", "DaemonSet"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("extensions/v1beta1", "ReplicaSet"),
        "newAPI": _api("apps/v1", "ReplicaSet"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("apps/v1beta1", "ReplicaSet"),
        "newAPI": _api("apps/v1", "ReplicaSet"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("apps/v1beta2", "ReplicaSet"),
        "newAPI": _api("apps/v1", "ReplicaSet"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("extensions/v1beta1", "NetworkPolicy"),
        "newAPI": _api("networking.k8s.io/v1", "NetworkPolicy"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("extensions/v1beta1", "PodSecurityPolicy"),
        "newAPI": _api("policy/v1beta1", "PodSecurityPolicy"),
        "removedInVersion": "1.16",
    },
    {
        "deprecatedAPI": _api("extensions/v1beta1", "Ingress"),
        "newAPI": _api("networking.k8s.io/v1beta1", "Ingress"),
        "deprecatedInVersion": "1.14",
    },
    {
        "deprecatedAPI": _api("networking.k8s.io/v1beta1", "Ingress"),
        "newAPI": _api("networking.k8s.io/v1", "Ingress"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("networking.k8s.io/v1beta1", "IngressClass"),
        "newAPI": _api("networking.k8s.io/v1", "IngressClass"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("apiextensions.k8s.io/v1beta1", "CustomResourceDefinition"),
        "newAPI": _api("apiextensions.k8s.io/v1", "CustomResourceDefinition"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api(
            "admissionregistration.k8s.io/v1beta1", "MutatingWebhookConfiguration"
        ),
        "newAPI": _api("admissionregistration.k8s.io/v1", "MutatingWebhookConfiguration"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api(
            "admissionregistration.k8s.io/v1beta1", "ValidatingWebhookConfiguration"
        ),
        "newAPI": _api("admissionregistration.k8s.io/v1", "ValidatingWebhookConfiguration"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("rbac.authorization.k8s.io/v1beta1", "ClusterRole"),
        "newAPI": _api("rbac.authorization.k8s.io/v1", "ClusterRole"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("rbac.authorization.k8s.io/v1beta1", "ClusterRoleBinding"),
        "newAPI": _api("rbac.authorization.k8s.io/v1", "ClusterRoleBinding"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("rbac.authorization.k8s.io/v1beta1", "Role"),
        "newAPI": _api("rbac.authorization.k8s.io/v1", "Role"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("rbac.authorization.k8s.io/v1beta1", "RoleBinding"),
        "newAPI": _api("rbac.authorization.k8s.io/v1", "RoleBinding"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("scheduling.k8s.io/v1beta1", "PriorityClass"),
        "newAPI": _api("scheduling.k8s.io/v1", "PriorityClass"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("storage.k8s.io/v1beta1", "CSIDriver"),
        "newAPI": _api("storage.k8s.io/v1", "CSIDriver"),
        "removedInVersion": "1.22",
    },
    {
        "deprecatedAPI": _api("batch/v1beta1", "CronJob"),
        "newAPI": _api("batch/v1", "CronJob"),
        "removedInVersion": "1.25",
    },
    {
        "deprecatedAPI": _api("policy/v1beta1", "PodDisruptionBudget"),
        "newAPI": _api("policy/v1", "PodDisruptionBudget"),
        "removedInVersion": "1.25",
    },
    {
        "deprecatedAPI": _api("autoscaling/v2beta1", "HorizontalPodAutoscaler"),
        "newAPI": _api("autoscaling/v2", "HorizontalPodAutoscaler"),
        "removedInVersion": "1.25",
    },
    {
        "deprecatedAPI": _api("autoscaling/v2beta2", "HorizontalPodAutoscaler"),
        "newAPI": _api("autoscaling/v2", "HorizontalPodAutoscaler"),
        "removedInVersion": "1.26",
    },
    {
        "deprecatedAPI": _api("flowcontrol.apiserver.k8s.io/v1beta1", "FlowSchema"),
        "newAPI": _api("flowcontrol.apiserver.k8s.io/v1beta3", "FlowSchema"),
        "removedInVersion": "1.26",
    },
    {
        "deprecatedAPI": _api("flowcontrol.apiserver.k8s.io/v1beta1", "PriorityLevelConfiguration"),
        "newAPI": _api("flowcontrol.apiserver.k8s.io/v1beta3", "PriorityLevelConfiguration"),
        "removedInVersion": "1.26",
    },
]
