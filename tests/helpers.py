"""Read-side helpers shared by the integration tests."""
from pods_integrator.xcode.project_document import ProjectDocument


def phase_names(document, target):
    names = []
    for _, phase in target.build_phases():
        names.append(str(getattr(phase, 'name', '') or phase.isa))
    return names


def library_ref_ids(document, target, product_name="libPods.a"):
    return [
        str(ref.get_id())
        for ref in target.frameworks_file_references()
        if ref.isa == 'PBXFileReference' and document.display_name(ref) == product_name
    ]


def file_reference_ids(document, path):
    return [
        str(ref.get_id())
        for ref in document.objects_in_section('PBXFileReference')
        if str(getattr(ref, 'path', '')) == path
    ]


def reopen(project_path):
    return ProjectDocument.open(project_path)
