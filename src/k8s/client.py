"""Kubernetes client wrapper."""

import subprocess
import json
from typing import List, Tuple, Optional, Dict, Any

from ..mapping.errors import ClusterVersionUnreachable
from ..model.cluster import ClusterVersion, KubeConfig
from ..utils.logger import get_logger

logger = get_logger(__name__)


class K8sClient:
    """Wrapper for kubectl commands."""

    def __init__(
        self,
        context: Optional[str] = None,
        namespace: Optional[str] = None,
        kubeconfig: Optional[str] = None,
    ):
        self.context = context
        self.namespace = namespace
        self.kubeconfig = kubeconfig
        self._verify_kubectl()

    @classmethod
    def from_kube_config(
        cls, kube_config: KubeConfig, namespace: Optional[str] = None
    ) -> "K8sClient":
        return cls(context=kube_config.context, namespace=namespace, kubeconfig=kube_config.file)

    def _verify_kubectl(self):
        """Verify kubectl is available and configured."""
        try:
            subprocess.run(
                ["kubectl", "version", "--client", "-o", "json"],
                capture_output=True,
                text=True,
                check=True,
            )
            logger.debug("kubectl verified successfully")
        except FileNotFoundError:
            raise RuntimeError("kubectl command not found. Please install kubectl.")
        except subprocess.CalledProcessError:
            logger.warning("kubectl verification failed")

    def _build_command(self, args: List[str]) -> List[str]:
        """Build kubectl command with kubeconfig, context and namespace."""
        cmd = ["kubectl"]

        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])

        if self.context:
            cmd.extend(["--context", self.context])

        cmd.extend(args)

        if self.namespace and "--all-namespaces" not in args and "-n" not in args:
            cmd.extend(["-n", self.namespace])

        return cmd

    def execute(self, args: List[str], input: Optional[str] = None) -> Tuple[bool, str]:
        """Execute kubectl command and return success status and output."""
        cmd = self._build_command(args)
        logger.debug(f"Executing: {' '.join(cmd)}")

        try:
            result = subprocess.run(cmd, input=input, capture_output=True, text=True, check=True)
            return True, result.stdout
        except subprocess.CalledProcessError as e:
            logger.error(f"Command failed: {e.stderr}")
            return False, e.stderr

    def get_json(
        self,
        resource_type: str,
        name: Optional[str] = None,
        selector: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Get resource(s) as JSON."""
        args = ["get", resource_type]

        if name:
            args.append(name)

        if selector:
            args.extend(["-l", selector])

        args.extend(["-o", "json"])

        success, output = self.execute(args)
        if success:
            try:
                return json.loads(output)
            except json.JSONDecodeError:
                logger.error("Failed to parse JSON output")
                return None
        return None

    def apply(self, resource: Dict[str, Any]) -> Tuple[bool, str]:
        """Create or update a resource from its JSON representation."""
        return self.execute(["apply", "-f", "-"], input=json.dumps(resource))

    def get_version(self) -> Optional[Dict[str, Any]]:
        """Get cluster version information."""
        success, output = self.execute(["version", "-o", "json"])
        if success:
            try:
                return json.loads(output)
            except json.JSONDecodeError:
                return None
        return None

    def get_server_version(self) -> str:
        """Return the server version as ``<major>.<minor>``."""
        version_data = self.get_version()
        if not version_data or "serverVersion" not in version_data:
            raise ClusterVersionUnreachable("kubernetes cluster unreachable")

        server_version = ClusterVersion(**version_data["serverVersion"])
        logger.debug(f"Kubernetes server git version: {server_version.git_version}")
        return server_version.short_version
