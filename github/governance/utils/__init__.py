#
# Copyright 2026 ABSA Group Limited
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Label governance utilities.

Modules
-------
common            Shared low-level utilities (verbose logging, action inputs).
commands          Slash-command extraction and prefix lookup.
config            Governance rule models and YAML loading.
event_context     Webhook payload resolution into issue / pull request / comment events.
models            Reconciliation result models (LabelPlan, StatusPayload).
label_reconciler  Per-prefix label reconciliation (adds, removals, needs label, comment, status).
runner            Rule selection and plan application against the GitHub client.
"""
